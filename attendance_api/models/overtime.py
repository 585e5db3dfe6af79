import datetime
from typing import Optional
from pydantic import BaseModel


class OvertimeEntry(BaseModel):
    id: int
    employee_name: Optional[str] = None
    date: datetime.date
    hours: float


class OvertimeCreated(BaseModel):
    message: str
    id: int
