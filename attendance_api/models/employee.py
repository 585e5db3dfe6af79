from typing import Optional
from pydantic import BaseModel, ConfigDict


class Employee(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int
    name: Optional[str] = None
    employee_id: Optional[str] = None
    department: Optional[str] = None
    designation: Optional[str] = None


class EmployeeCreated(BaseModel):
    message: str
    id: int
