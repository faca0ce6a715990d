import logging

from timegrid.schemas.department import Assignment, Batch, Subject, Teacher
from timegrid.services.demand import expand_demand


def test_expands_one_session_per_weekly_lecture(small_department):
    expansion = expand_demand(
        small_department.batches,
        small_department.subjects,
        small_department.assignments,
        small_department.teachers,
    )

    # Batch A: 3 x s1 + 2 x s2, Batch B: 3 x s1
    assert expansion.total == 8
    assert expansion.unresolved == []
    batch_b = [item for item in expansion.sessions if item.batch.id == "b2"]
    assert len(batch_b) == 3
    assert all(item.batch_index == 1 and item.teacher.id == "t1" for item in batch_b)


def test_missing_assignment_is_skipped_without_sessions(caplog):
    teachers = [Teacher(id="t1", name="Dr. One")]
    subjects = [Subject(id="s1", name="Algebra", code="MA101"), Subject(id="s2", name="Orphan", code="OR100")]
    assignments = [Assignment(id="a1", teacher_id="t1", subject_id="s1", weekly_lectures=2)]
    batches = [Batch(id="b1", name="Batch A", subject_ids=["s1", "s2", "s9"])]

    with caplog.at_level(logging.WARNING, logger="timegrid.services.demand"):
        expansion = expand_demand(batches, subjects, assignments, teachers)

    assert expansion.total == 2
    assert {item.subject.id for item in expansion.sessions} == {"s1"}
    reasons = {item.subject_id: item.reason for item in expansion.unresolved}
    assert reasons == {"s2": "no assignment", "s9": "unknown subject"}
    assert "Skipping subject s2 for batch Batch A" in caplog.text


def test_unknown_teacher_is_unresolved():
    subjects = [Subject(id="s1", name="Algebra", code="MA101")]
    assignments = [Assignment(id="a1", teacher_id="ghost", subject_id="s1", weekly_lectures=4)]
    batches = [Batch(id="b1", name="Batch A", subject_ids=["s1"])]

    expansion = expand_demand(batches, subjects, assignments, [])

    assert expansion.total == 0
    assert len(expansion.unresolved) == 1
    assert expansion.unresolved[0].reason == "unknown teacher 'ghost'"


def test_first_assignment_for_a_subject_wins():
    teachers = [Teacher(id="t1", name="Dr. One"), Teacher(id="t2", name="Dr. Two")]
    subjects = [Subject(id="s1", name="Algebra", code="MA101")]
    assignments = [
        Assignment(id="a1", teacher_id="t1", subject_id="s1", weekly_lectures=2),
        Assignment(id="a2", teacher_id="t2", subject_id="s1", weekly_lectures=5),
    ]
    batches = [Batch(id="b1", name="Batch A", subject_ids=["s1"])]

    expansion = expand_demand(batches, subjects, assignments, teachers)

    assert expansion.total == 2
    assert {item.teacher.id for item in expansion.sessions} == {"t1"}


def test_non_positive_weekly_lectures_produce_nothing():
    teachers = [Teacher(id="t1", name="Dr. One")]
    subjects = [Subject(id="s1", name="Algebra", code="MA101")]
    assignments = [Assignment(id="a1", teacher_id="t1", subject_id="s1", weekly_lectures=-3)]
    batches = [Batch(id="b1", name="Batch A", subject_ids=["s1"])]

    expansion = expand_demand(batches, subjects, assignments, teachers)

    assert expansion.total == 0
    assert expansion.unresolved == []
