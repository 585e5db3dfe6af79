"""Attendance endpoints: list, mark, update status, delete."""

import datetime

import pytest

import attendance_api.routers.attendance as attendance_router
from attendance_api.core.errors import DatabaseError
from attendance_api.models.attendance import AttendanceRecord


async def test_list_attendance_serializes_dates(client, fake):
    fake(
        attendance_router,
        "list_attendance",
        [
            AttendanceRecord(id=2, employee_name="Ada", date=datetime.date(2024, 1, 2), status="Absent"),
            AttendanceRecord(id=1, employee_name="Ada", date=datetime.date(2024, 1, 1), status="Present"),
        ],
    )

    res = await client.get("/attendance")

    assert res.status_code == 200
    body = res.json()
    assert [r["date"] for r in body] == ["2024-01-02", "2024-01-01"]
    assert body[1] == {"id": 1, "employee_name": "Ada", "date": "2024-01-01", "status": "Present"}


async def test_mark_attendance(client, fake, calls):
    fake(attendance_router, "create_attendance", 10)

    res = await client.post("/attendance", json={"employee_id": 1, "date": "2024-01-01", "status": "Present"})

    assert res.status_code == 200
    assert res.json()["message"] == "Attendance added successfully"
    assert calls == [("create_attendance", (1, "2024-01-01", "Present"))]


@pytest.mark.parametrize(
    "payload",
    [
        {"date": "2024-01-01", "status": "Present"},
        {"employee_id": 1, "status": "Present"},
        {"employee_id": 1, "date": "2024-01-01"},
        {"employee_id": 1, "date": "2024-01-01", "status": ""},
        {"employee_id": 0, "date": "2024-01-01", "status": "Present"},
    ],
)
async def test_mark_attendance_missing_fields_skips_database(client, fake, calls, payload):
    fake(attendance_router, "create_attendance", 10)

    res = await client.post("/attendance", json=payload)

    assert res.status_code == 400
    assert res.json() == {"error": "Missing required fields"}
    assert calls == []


async def test_mark_attendance_without_body(client, fake, calls):
    fake(attendance_router, "create_attendance", 10)

    res = await client.post("/attendance")

    assert res.status_code == 400
    assert calls == []


async def test_mark_attendance_accepts_any_status_string(client, fake, calls):
    fake(attendance_router, "create_attendance", 11)

    res = await client.post("/attendance", json={"employee_id": 1, "date": "2024-01-01", "status": "Remote"})

    assert res.status_code == 200
    assert calls[0][1][2] == "Remote"


async def test_mark_attendance_database_error(client, fake):
    fake(attendance_router, "create_attendance", raises=DatabaseError())

    res = await client.post("/attendance", json={"employee_id": 1, "date": "2024-01-01", "status": "Present"})

    assert res.status_code == 500
    assert res.json() == {"error": "Internal Server Error"}


async def test_update_attendance_status(client, fake, calls):
    fake(attendance_router, "update_attendance_status", 1)

    res = await client.put("/attendance/3", json={"status": "On Leave"})

    assert res.status_code == 200
    assert res.json() == {"message": "Attendance updated successfully!"}
    assert calls == [("update_attendance_status", (3, "On Leave"))]


async def test_update_attendance_requires_status(client, fake, calls):
    fake(attendance_router, "update_attendance_status", 1)

    res = await client.put("/attendance/3", json={})

    assert res.status_code == 400
    assert res.json() == {"error": "Status is required"}
    assert calls == []


async def test_update_missing_attendance_returns_404(client, fake):
    fake(attendance_router, "update_attendance_status", 0)

    res = await client.put("/attendance/404", json={"status": "Present"})

    assert res.status_code == 404
    assert res.json() == {"error": "Attendance record not found"}


async def test_delete_attendance(client, fake):
    fake(attendance_router, "delete_attendance", 1)

    res = await client.delete("/attendance/3")

    assert res.status_code == 200
    assert res.json() == {"message": "Attendance record deleted successfully!"}


async def test_delete_missing_attendance_returns_404(client, fake):
    fake(attendance_router, "delete_attendance", 0)

    res = await client.delete("/attendance/3")

    assert res.status_code == 404
    assert res.json() == {"error": "Attendance record not found"}
