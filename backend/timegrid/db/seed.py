from __future__ import annotations

from timegrid.schemas.department import Department

WEEKDAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]

SAMPLE_DEPARTMENTS: list[dict] = [
    {
        "id": "dept-cse",
        "name": "Computer Science & Engineering",
        "teachers": [
            {"id": "t1", "name": "Dr. Tanwi"},
            {"id": "t2", "name": "Prof. Sandeep"},
            {"id": "t3", "name": "Prof. Sachin"},
        ],
        "subjects": [
            {"id": "s1", "name": "Intro to Programming", "code": "CS101"},
            {"id": "s2", "name": "Data Structures", "code": "CS201"},
            {"id": "s3", "name": "Algorithms", "code": "CS305"},
        ],
        "assignments": [
            {"id": "a1", "teacherId": "t1", "subjectId": "s1", "weeklyLectures": 4},
            {"id": "a2", "teacherId": "t2", "subjectId": "s2", "weeklyLectures": 4},
            {"id": "a3", "teacherId": "t1", "subjectId": "s3", "weeklyLectures": 3},
            {"id": "a6", "teacherId": "t3", "subjectId": "s2", "weeklyLectures": 4},
        ],
        "batches": [
            {"id": "b1", "name": "Batch A (Year 1)", "subjectIds": ["s1", "s2"]},
            {"id": "b2", "name": "Batch B (Year 2)", "subjectIds": ["s2", "s3"]},
        ],
        "classrooms": [
            {"id": "c1", "name": "CS-101", "capacity": 60, "equipment": ["Projector", "Whiteboard"]},
            {"id": "c2", "name": "CS-102", "capacity": 70, "equipment": ["Projector", "Smartboard"]},
            {"id": "c3", "name": "CS Lab A", "capacity": 40, "equipment": ["Computers", "Projector"]},
        ],
        "settings": {
            "workingDays": WEEKDAYS,
            "maxLecturesPerDay": 3,
            "periodTimings": [
                "09:00 - 10:00",
                "10:00 - 11:00",
                "11:00 - 12:00",
                "13:00 - 14:00",
                "14:00 - 15:00",
            ],
        },
    },
    {
        "id": "dept-it",
        "name": "Information Technology",
        "teachers": [
            {"id": "t4", "name": "Dr. J. Iyer"},
            {"id": "t2", "name": "Dr. I. Mehta"},
        ],
        "subjects": [
            {"id": "s4", "name": "Networking", "code": "IT202"},
            {"id": "s5", "name": "Cyber Security", "code": "IT405"},
        ],
        "assignments": [
            {"id": "a4", "teacherId": "t4", "subjectId": "s4", "weeklyLectures": 5},
            {"id": "a5", "teacherId": "t2", "subjectId": "s5", "weeklyLectures": 5},
        ],
        "batches": [{"id": "b3", "name": "Batch C (Year 3)", "subjectIds": ["s4", "s5"]}],
        "classrooms": [
            {"id": "c4", "name": "IT-201", "capacity": 50, "equipment": ["Projector", "Whiteboard"]},
            {"id": "c5", "name": "IT-202", "capacity": 60, "equipment": ["Projector", "Smartboard"]},
        ],
        "settings": {
            "workingDays": WEEKDAYS,
            "maxLecturesPerDay": 4,
            "periodTimings": [
                "09:00 - 10:00",
                "10:00 - 11:00",
                "11:00 - 12:00",
                "13:00 - 14:00",
                "14:00 - 15:00",
                "15:00 - 16:00",
            ],
        },
    },
    {
        "id": "dept-me",
        "name": "Mechanical Engineering",
        "settings": {
            "workingDays": WEEKDAYS,
            "maxLecturesPerDay": 4,
            "periodTimings": [
                "08:00 - 09:00",
                "09:00 - 10:00",
                "10:00 - 11:00",
                "11:00 - 12:00",
                "13:00 - 14:00",
                "14:00 - 15:00",
                "15:00 - 16:00",
            ],
        },
    },
    {
        "id": "dept-ds",
        "name": "CSE (Data Science)",
        "settings": {
            "workingDays": WEEKDAYS,
            "maxLecturesPerDay": 3,
            "periodTimings": [
                "09:30 - 10:30",
                "10:30 - 11:30",
                "11:30 - 12:30",
                "13:30 - 14:30",
                "14:30 - 15:30",
            ],
        },
    },
]


def sample_departments() -> list[Department]:
    return [Department.model_validate(item) for item in SAMPLE_DEPARTMENTS]
