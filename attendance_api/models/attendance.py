import datetime
from typing import Optional
from pydantic import BaseModel


class AttendanceRecord(BaseModel):
    id: int
    employee_name: Optional[str] = None
    date: datetime.date
    status: str


class AttendanceCreated(BaseModel):
    message: str
    id: Optional[int] = None
