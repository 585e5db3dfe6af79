import logging
import math
from typing import Any, List, Optional

from fastapi import APIRouter, Body

from ..core.errors import ClientInputError, DatabaseError, InternalError, ResourceNotFound
from ..models.common import MessageResponse
from ..models.overtime import OvertimeCreated, OvertimeEntry
from ..services.overtime_service import create_overtime, delete_overtime, list_overtime

router = APIRouter()
log = logging.getLogger(__name__)

MISSING_FIELDS = "Please provide all fields: employee_id, date, and hours."


def parse_hours(value: Any) -> Optional[float]:
    """Return hours as a finite float, or None when absent or not a number. Zero is a valid value."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str) and not value.strip():
        return None
    try:
        hours = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(hours):
        return None
    return hours


@router.get("/overtime", response_model=List[OvertimeEntry])
async def get_overtime():
    try:
        return await list_overtime()
    except DatabaseError as exc:
        log.exception("Error fetching overtime data")
        raise InternalError("Internal Server Error") from exc


@router.post("/overtime", response_model=OvertimeCreated)
async def add_overtime(payload: Optional[dict] = Body(None)):
    data = payload if isinstance(payload, dict) else {}
    employee_id = data.get("employee_id")
    date = data.get("date")
    hours = parse_hours(data.get("hours"))
    if not employee_id or not date or hours is None:
        log.warning("Missing fields: %s", data)
        raise ClientInputError(MISSING_FIELDS)

    try:
        new_id = await create_overtime(employee_id, date, hours)
    except DatabaseError as exc:
        log.exception("SQL insert error while adding overtime")
        raise InternalError("Database error while adding overtime.") from exc
    return {"message": "Overtime added successfully!", "id": new_id}


@router.delete("/overtime/{entry_id}", response_model=MessageResponse)
async def remove_overtime(entry_id: int):
    try:
        affected = await delete_overtime(entry_id)
    except DatabaseError as exc:
        log.exception("Error deleting overtime %s", entry_id)
        raise InternalError("Internal Server Error") from exc
    if affected == 0:
        raise ResourceNotFound("Overtime entry not found.")
    return {"message": "Overtime entry deleted successfully!"}
