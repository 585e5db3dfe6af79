from typing import Any, List

from ..core.database import execute, fetch, insert_returning_id
from ..models.overtime import OvertimeEntry
from .schema_service import ensure_tables


async def list_overtime() -> List[OvertimeEntry]:
    await ensure_tables()
    rows = await fetch(
        """
        SELECT overtime.id, employees.name AS employee_name, overtime.date, overtime.hours
        FROM overtime
        JOIN employees ON overtime.employee_id = employees.id
        """
    )
    return [OvertimeEntry(**r) for r in rows]


async def create_overtime(employee_id: Any, date: Any, hours: float) -> int:
    await ensure_tables()
    return await insert_returning_id(
        "INSERT INTO overtime (employee_id, date, hours) VALUES (%s, %s, %s) RETURNING id",
        [employee_id, date, hours],
    )


async def delete_overtime(entry_id: int) -> int:
    await ensure_tables()
    return await execute("DELETE FROM overtime WHERE id = %s", [entry_id])
