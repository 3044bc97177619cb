"""
Payroll, signature and notification schemas.

Includes the PayrollData value object (one slip's line items) and the
derived totals computed locally by PayrollDataProcessor.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PayrollStatus(str, Enum):
    """Payroll lifecycle: created as draft, published, then signed."""

    DRAFT = "draft"
    PUBLISHED = "published"
    SIGNED = "signed"


class NotificationStatus(str, Enum):
    PENDING = "pending"
    SENT = "sent"
    FAILED = "failed"


class NotificationType(str, Enum):
    EMAIL = "email"
    SMS = "sms"
    WECHAT = "wechat"


# Value Objects


class PayrollData(BaseModel):
    """
    Flat mapping of named payroll components.

    Gross components: basic_salary, performance, meal_allowance, transport
    Deduction components: tax, social_insurance

    Templates may define extra components; they are carried through as-is.
    """

    model_config = ConfigDict(extra="allow")

    basic_salary: float = 0
    performance: float = 0
    meal_allowance: float = 0
    transport: float = 0
    tax: float = 0
    social_insurance: float = 0


class PayrollTotals(BaseModel):
    """Derived totals. total_net may be negative."""

    total_gross: float
    total_deductions: float
    total_net: float


class ValidationResult(BaseModel):
    is_valid: bool
    errors: list[str] = Field(default_factory=list)


# Request Schemas


class PayrollCreate(BaseModel):
    """Input schema for creating a draft payroll."""

    employee_id: int
    period: str = Field(pattern=r"^\d{4}-\d{2}$")  # e.g. 2024-01
    template_id: int
    payroll_data: PayrollData

    # Prorating: only basic salary is scaled by work_days / month_days
    work_days: float = 0
    month_days: float = 0
    is_prorated: bool = False


class PayrollUpdate(BaseModel):
    """Input schema for updating a draft payroll."""

    period: Optional[str] = Field(default=None, pattern=r"^\d{4}-\d{2}$")
    template_id: Optional[int] = None
    payroll_data: Optional[PayrollData] = None
    work_days: Optional[float] = None
    month_days: Optional[float] = None
    is_prorated: Optional[bool] = None


class SignatureRecord(BaseModel):
    """
    Captured signature submitted for one payroll.

    signature_data is a raster image encoded as a data URL.
    """

    payroll_id: str
    signature_data: str
    ip_address: str
    user_agent: str
    device_info: str
