def _generate(client, department_id="dept-cse", seed=7):
    response = client.post(f"/api/departments/{department_id}/generate", json={"seed": seed})
    assert response.status_code == 200
    return response.json()


def test_departments_fall_back_to_sample_data(client):
    response = client.get("/api/departments/")
    assert response.status_code == 200
    payload = response.json()
    assert [item["id"] for item in payload] == ["dept-cse", "dept-it", "dept-me", "dept-ds"]
    assert payload[0]["settings"]["periodsPerDay"] == 5
    assert payload[0]["finalizedTimetable"] is None


def test_create_update_and_delete_department(client):
    created = client.post("/api/departments/", json={"name": "Civil Engineering"})
    assert created.status_code == 201
    department = created.json()
    assert department["settings"]["periodsPerDay"] == 7
    assert department["settings"]["maxLecturesPerDay"] == 4

    updated = client.put(
        f"/api/departments/{department['id']}",
        json={
            "teachers": [{"id": "t1", "name": "Dr. Beam"}],
            "settings": {"workingDays": ["Monday", "Tuesday"], "periodTimings": ["09:00 - 10:00"], "maxLecturesPerDay": 2},
        },
    )
    assert updated.status_code == 200
    body = updated.json()
    assert body["name"] == "Civil Engineering"
    assert body["teachers"] == [{"id": "t1", "name": "Dr. Beam"}]
    assert body["settings"]["periodsPerDay"] == 1

    deleted = client.delete(f"/api/departments/{department['id']}")
    assert deleted.status_code == 204
    missing = client.get(f"/api/departments/{department['id']}")
    assert missing.status_code == 404
    assert "not found" in missing.json()["message"]


def test_generate_returns_grid_conflicts_and_stats(client):
    payload = _generate(client)

    assert set(payload["grid"]) == {"Monday", "Tuesday", "Wednesday", "Thursday", "Friday"}
    stats = payload["stats"]
    unplaced = [item for item in payload["conflicts"] if item["type"] == "Unplaced Class"]
    assert stats["requiredSessions"] == stats["placedSessions"] + len(unplaced)
    assert stats["unresolvedPairs"] == 0
    assert payload["unresolved"] == []

    assert _generate(client)["grid"] == payload["grid"]


def test_generate_rejects_incomplete_configuration(client):
    response = client.post("/api/departments/dept-me/generate", json={})
    assert response.status_code == 400
    body = response.json()
    assert body["details"]["problems"] == ["At least one batch is required"]


def test_analyze_reports_conflicts_for_a_submitted_grid(client):
    grid = _generate(client)["grid"]

    response = client.post("/api/departments/dept-cse/analyze", json={"grid": grid})
    assert response.status_code == 200
    again = client.post("/api/departments/dept-cse/analyze", json={"grid": grid})
    assert response.json() == again.json()
    assert all(item["type"] != "Unplaced Class" for item in response.json()["conflicts"])


def test_publish_lock_and_schedules(client):
    before = client.get("/api/departments/dept-cse/faculty/t1/schedule")
    assert before.status_code == 409

    grid = _generate(client)["grid"]
    published = client.post("/api/departments/dept-cse/publish", json={"grid": grid})
    assert published.status_code == 200
    assert published.json()["finalizedTimetable"] == grid

    locked = client.post("/api/departments/dept-cse/publish", json={"grid": grid})
    assert locked.status_code == 409

    replaced = client.post("/api/departments/dept-cse/publish", json={"grid": grid, "replace": True})
    assert replaced.status_code == 200

    renamed = client.put("/api/departments/dept-cse", json={"name": "CSE"})
    assert renamed.json()["finalizedTimetable"] == grid

    faculty = client.get("/api/departments/dept-cse/faculty/t1/schedule")
    assert faculty.status_code == 200
    faculty_body = faculty.json()
    assert faculty_body["teacherName"] == "Dr. Tanwi"
    assert faculty_body["days"] == ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]
    booked = [entry for row in faculty_body["schedule"].values() for entry in row if entry is not None]
    assert {entry["subjectCode"] for entry in booked} <= {"CS101", "CS305"}

    by_name = client.get("/api/faculty/schedule", params={"teacherName": "Dr. Tanwi"})
    assert by_name.status_code == 200
    assert by_name.json()["schedule"] == faculty_body["schedule"]

    batch = client.get("/api/departments/dept-cse/batches/b1/schedule")
    assert batch.status_code == 200
    assert batch.json()["batchName"] == "Batch A (Year 1)"

    unlocked = client.delete("/api/departments/dept-cse/finalized")
    assert unlocked.status_code == 200
    assert unlocked.json()["finalizedTimetable"] is None


def test_publish_rejects_mismatched_grid(client):
    grid = _generate(client)["grid"]
    grid.pop("Friday")

    response = client.post("/api/departments/dept-cse/publish", json={"grid": grid})
    assert response.status_code == 400
    assert "Grid is missing day(s): Friday" in response.json()["details"]["problems"]


def test_reset_restores_sample_departments(client):
    client.delete("/api/departments/dept-ds")
    assert len(client.get("/api/departments/").json()) == 3

    response = client.post("/api/departments/reset")
    assert response.status_code == 200
    assert len(response.json()) == 4


def test_workload_report(client):
    response = client.get("/api/faculty/workload")
    assert response.status_code == 200
    rows = response.json()
    assert rows[0]["totalHours"] >= rows[-1]["totalHours"]
    tanwi = next(row for row in rows if row["teacherName"] == "Dr. Tanwi")
    assert tanwi["totalHours"] == 7
    assert tanwi["status"] == "Under-utilized"
    assert tanwi["assignments"][0]["deptName"] == "Computer Science & Engineering"


def test_change_request_lifecycle(client):
    payload = {
        "requesterName": "Dr. Tanwi",
        "type": "RESCHEDULE",
        "from": {"day": "Monday", "time": "09:00 - 10:00", "course": "CS101"},
        "toDay": "Friday",
        "toTime": "14:00 - 15:00",
        "reason": "Lab maintenance",
    }
    created = client.post("/api/requests/", json=payload)
    assert created.status_code == 201
    first = created.json()
    assert first["status"] == "PENDING"
    assert first["to"] == {"day": "Friday", "time": "14:00 - 15:00"}

    second = client.post("/api/requests/", json={**payload, "requesterName": "Prof. Sandeep"}).json()

    mine = client.get("/api/requests/", params={"requester": "Dr. Tanwi"})
    assert [item["id"] for item in mine.json()] == [first["id"]]

    cancelled = client.post(f"/api/requests/{first['id']}/cancel")
    assert cancelled.status_code == 200
    assert cancelled.json()["status"] == "CANCELLED"

    conflict = client.post(f"/api/requests/{first['id']}/review", json={"status": "APPROVED"})
    assert conflict.status_code == 409

    invalid = client.post(f"/api/requests/{second['id']}/review", json={"status": "PENDING"})
    assert invalid.status_code == 422

    approved = client.post(f"/api/requests/{second['id']}/review", json={"status": "APPROVED"})
    assert approved.status_code == 200

    pending = client.get("/api/requests/", params={"status": "PENDING"})
    assert pending.json() == []

    missing = client.post("/api/requests/unknown/cancel")
    assert missing.status_code == 404


def test_reschedule_request_requires_target(client):
    response = client.post(
        "/api/requests/",
        json={
            "requesterName": "Dr. Tanwi",
            "from": {"day": "Monday", "time": "09:00 - 10:00", "course": "CS101"},
        },
    )
    assert response.status_code == 422


def test_locked_department_rejects_batch_and_settings_edits(client):
    grid = _generate(client)["grid"]
    assert client.post("/api/departments/dept-cse/publish", json={"grid": grid}).status_code == 200

    department = client.get("/api/departments/dept-cse").json()
    batch_b = next(item for item in department["batches"] if item["id"] == "b2")

    reordered = client.put(
        "/api/departments/dept-cse",
        json={
            "batches": [batch_b],
            "settings": {"workingDays": ["Monday"], "periodTimings": ["p1"]},
        },
    )
    assert reordered.status_code == 409
    assert reordered.json()["details"]["changed_fields"] == ["batches", "settings"]

    unchanged = client.get("/api/departments/dept-cse/batches/b2/schedule").json()
    assert unchanged["schedule"]["Monday"][0] == _batch_cell(grid, "Monday", 0, 1)

    same_inputs = client.put(
        "/api/departments/dept-cse",
        json={"batches": department["batches"], "settings": department["settings"], "name": "CSE"},
    )
    assert same_inputs.status_code == 200

    assert client.delete("/api/departments/dept-cse/finalized").status_code == 200
    edited = client.put("/api/departments/dept-cse", json={"batches": [batch_b]})
    assert edited.status_code == 200
    assert [item["id"] for item in edited.json()["batches"]] == ["b2"]


def _batch_cell(grid, day, period, batch_index):
    slot = grid[day][period][batch_index]
    if slot is None:
        return None
    return {
        "subjectCode": slot["subject"]["code"],
        "subjectName": slot["subject"]["name"],
        "teacherId": slot["teacher"]["id"],
        "teacherName": slot["teacher"]["name"],
    }
