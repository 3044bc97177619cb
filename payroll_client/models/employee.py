"""
Employee and payroll template schemas for the HR service API.

Records are owned by the server; these schemas only shape what the
client sends. Every read goes back to the server.
"""

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, EmailStr, Field


class EmployeeStatus(str, Enum):
    """Employee status in the system."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    RESIGNED = "resigned"


# Request Schemas


class EmployeeCreate(BaseModel):
    """Input schema for creating a new employee."""

    name: str = Field(min_length=1, max_length=255)
    employee_no: str = Field(min_length=1, max_length=50)
    department: str = Field(max_length=255)
    position: str = Field(max_length=255)
    email: EmailStr
    phone: str = Field(max_length=20)
    join_date: Optional[date] = None


class EmployeeUpdate(BaseModel):
    """Input schema for updating an existing employee."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    employee_no: Optional[str] = Field(default=None, max_length=50)
    department: Optional[str] = Field(default=None, max_length=255)
    position: Optional[str] = Field(default=None, max_length=255)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(default=None, max_length=20)
    status: Optional[EmployeeStatus] = None
    join_date: Optional[date] = None
    leave_date: Optional[date] = None


class PayrollTemplateCreate(BaseModel):
    """Input schema for a payroll template. `fields` is the JSON field config."""

    name: str = Field(min_length=1, max_length=255)
    description: str = ""
    fields: str = "[]"
    is_active: bool = True


class PayrollTemplateUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    fields: Optional[str] = None
    is_active: Optional[bool] = None
