import datetime
from typing import Optional
from pydantic import BaseModel


class ReportSummaryRow(BaseModel):
    employee_id: int
    employee_name: Optional[str] = None
    total_present: int = 0
    total_absent: int = 0
    total_leave: int = 0
    total_overtime: float = 0


class ReportDetailRow(BaseModel):
    """One line group of the exported document."""

    employee_name: Optional[str] = None
    date: Optional[datetime.date] = None
    status: Optional[str] = None
    hours: Optional[float] = None
