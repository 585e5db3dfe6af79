import logging
from typing import List, Optional

from fastapi import APIRouter, Body

from ..core.errors import ClientInputError, DatabaseError, InternalError, ResourceNotFound
from ..models.attendance import AttendanceCreated, AttendanceRecord
from ..models.common import MessageResponse
from ..services.attendance_service import (
    create_attendance,
    delete_attendance,
    list_attendance,
    update_attendance_status,
)

router = APIRouter()
log = logging.getLogger(__name__)


@router.get("/attendance", response_model=List[AttendanceRecord])
async def get_attendance():
    try:
        return await list_attendance()
    except DatabaseError as exc:
        log.exception("Error fetching attendance")
        raise InternalError("Internal Server Error") from exc


@router.post("/attendance", response_model=AttendanceCreated)
async def mark_attendance(payload: Optional[dict] = Body(None)):
    data = payload if isinstance(payload, dict) else {}
    employee_id = data.get("employee_id")
    date = data.get("date")
    status = data.get("status")
    if not employee_id or not date or not status:
        raise ClientInputError("Missing required fields")

    try:
        new_id = await create_attendance(employee_id, date, status)
    except DatabaseError as exc:
        log.exception("Error adding attendance")
        raise InternalError("Internal Server Error") from exc
    return {"message": "Attendance added successfully", "id": new_id}


@router.put("/attendance/{record_id}", response_model=MessageResponse)
async def update_attendance(record_id: int, payload: Optional[dict] = Body(None)):
    status = payload.get("status") if isinstance(payload, dict) else None
    if not status:
        raise ClientInputError("Status is required")

    try:
        affected = await update_attendance_status(record_id, status)
    except DatabaseError as exc:
        log.exception("Error updating attendance %s", record_id)
        raise InternalError("Internal Server Error") from exc
    if affected == 0:
        raise ResourceNotFound("Attendance record not found")
    return {"message": "Attendance updated successfully!"}


@router.delete("/attendance/{record_id}", response_model=MessageResponse)
async def remove_attendance(record_id: int):
    try:
        affected = await delete_attendance(record_id)
    except DatabaseError as exc:
        log.exception("Error deleting attendance %s", record_id)
        raise InternalError("Internal Server Error") from exc
    if affected == 0:
        raise ResourceNotFound("Attendance record not found")
    return {"message": "Attendance record deleted successfully!"}
