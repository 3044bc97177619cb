"""
Resignation workflow schemas.

Application lifecycle: draft -> submitted -> approved / rejected -> completed.
Approved applications collect signatures (employee, hr, manager) and get a
resignation report generated server-side.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class ResignationType(str, Enum):
    VOLUNTARY = "voluntary"
    DISMISSAL = "dismissal"
    CONTRACT_EXPIRY = "contract_expiry"


class ResignationStatus(str, Enum):
    DRAFT = "draft"
    SUBMITTED = "submitted"
    APPROVED = "approved"
    REJECTED = "rejected"
    COMPLETED = "completed"


class SignerType(str, Enum):
    EMPLOYEE = "employee"
    HR = "hr"
    MANAGER = "manager"


# Request Schemas


class ResignationCreate(BaseModel):
    employee_id: int
    resignation_type: ResignationType
    resignation_date: datetime
    last_working_date: datetime
    reason: str = Field(min_length=1)
    handover_notes: str = ""


class ResignationUpdate(BaseModel):
    resignation_type: Optional[ResignationType] = None
    resignation_date: Optional[datetime] = None
    last_working_date: Optional[datetime] = None
    reason: Optional[str] = None
    handover_notes: Optional[str] = None
    status: Optional[ResignationStatus] = None
    approval_comments: Optional[str] = None


class ResignationSignRequest(BaseModel):
    """Signature for a resignation document. application_id is the UUID."""

    application_id: str
    signer_type: SignerType
    signature_data: str
    device_info: str = ""


class ResignationReportCreate(BaseModel):
    application_id: int
    work_summary: str = Field(min_length=1)
    unfinished_tasks: str = ""
    company_property_returned: bool = False
    financial_settlement: bool = False


class ResignationReportUpdate(BaseModel):
    work_summary: Optional[str] = None
    unfinished_tasks: Optional[str] = None
    company_property_returned: Optional[bool] = None
    financial_settlement: Optional[bool] = None
