import logging
from typing import List, Optional

from fastapi import APIRouter, Body

from ..core.errors import DatabaseError, InternalError, ResourceNotFound
from ..models.common import MessageResponse
from ..models.employee import Employee, EmployeeCreated
from ..services.employees_service import create_employee, delete_employee, list_employees

router = APIRouter()
log = logging.getLogger(__name__)


@router.get("/employees", response_model=List[Employee])
async def get_employees():
    try:
        employees = await list_employees()
    except DatabaseError as exc:
        log.exception("Error fetching employees")
        raise InternalError("Internal Server Error") from exc
    log.debug("Employees fetched: %d", len(employees))
    return employees


@router.post("/employees", response_model=EmployeeCreated)
async def add_employee(payload: Optional[dict] = Body(None)):
    data = payload if isinstance(payload, dict) else {}
    try:
        new_id = await create_employee(
            data.get("name"),
            data.get("employee_id"),
            data.get("department"),
            data.get("designation"),
        )
    except DatabaseError as exc:
        log.exception("Error adding employee")
        raise InternalError("Database error") from exc
    return {"message": "Employee added successfully!", "id": new_id}


@router.delete("/employees/{employee_pk}", response_model=MessageResponse)
async def remove_employee(employee_pk: int):
    try:
        affected = await delete_employee(employee_pk)
    except DatabaseError as exc:
        log.exception("Error deleting employee %s", employee_pk)
        raise InternalError("Database error") from exc
    if affected == 0:
        raise ResourceNotFound("Employee not found")
    return {"message": "Employee deleted successfully"}
