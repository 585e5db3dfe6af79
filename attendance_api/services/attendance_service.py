from typing import Any, List

from ..core.database import execute, fetch, insert_returning_id
from ..models.attendance import AttendanceRecord
from .schema_service import ensure_tables


async def list_attendance() -> List[AttendanceRecord]:
    await ensure_tables()
    rows = await fetch(
        """
        SELECT attendance.id, employees.name AS employee_name, attendance.date, attendance.status
        FROM attendance
        JOIN employees ON attendance.employee_id = employees.id
        ORDER BY attendance.date DESC
        """
    )
    return [AttendanceRecord(**r) for r in rows]


async def create_attendance(employee_id: Any, date: Any, status: str) -> int:
    await ensure_tables()
    return await insert_returning_id(
        "INSERT INTO attendance (employee_id, date, status) VALUES (%s, %s, %s) RETURNING id",
        [employee_id, date, status],
    )


async def update_attendance_status(record_id: int, status: str) -> int:
    await ensure_tables()
    return await execute("UPDATE attendance SET status = %s WHERE id = %s", [status, record_id])


async def delete_attendance(record_id: int) -> int:
    await ensure_tables()
    return await execute("DELETE FROM attendance WHERE id = %s", [record_id])
