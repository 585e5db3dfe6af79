from typing import Any, List, Optional

from ..core.database import execute, fetch, insert_returning_id
from ..models.employee import Employee
from .schema_service import ensure_tables


async def list_employees() -> List[Employee]:
    await ensure_tables()
    rows = await fetch("SELECT * FROM employees")
    return [Employee(**r) for r in rows]


async def create_employee(
    name: Optional[Any],
    employee_id: Optional[Any],
    department: Optional[Any],
    designation: Optional[Any],
) -> int:
    await ensure_tables()
    return await insert_returning_id(
        """
        INSERT INTO employees (name, employee_id, department, designation)
        VALUES (%s, %s, %s, %s)
        RETURNING id
        """,
        [name, employee_id, department, designation],
    )


async def delete_employee(employee_pk: int) -> int:
    await ensure_tables()
    return await execute("DELETE FROM employees WHERE id = %s", [employee_pk])
