"""
Payroll Client Models.

Exports all schema classes for easy importing.
"""

from payroll_client.models.auth import LoginRequest, LoginResponse
from payroll_client.models.employee import (
    EmployeeCreate,
    EmployeeStatus,
    EmployeeUpdate,
    PayrollTemplateCreate,
    PayrollTemplateUpdate,
)
from payroll_client.models.payroll import (
    NotificationStatus,
    NotificationType,
    PayrollCreate,
    PayrollData,
    PayrollStatus,
    PayrollTotals,
    PayrollUpdate,
    SignatureRecord,
    ValidationResult,
)
from payroll_client.models.resignation import (
    ResignationCreate,
    ResignationReportCreate,
    ResignationReportUpdate,
    ResignationSignRequest,
    ResignationStatus,
    ResignationType,
    ResignationUpdate,
    SignerType,
)

__all__ = [
    # Enums
    "EmployeeStatus",
    "PayrollStatus",
    "NotificationStatus",
    "NotificationType",
    "ResignationType",
    "ResignationStatus",
    "SignerType",
    # Value Objects
    "PayrollData",
    "PayrollTotals",
    "ValidationResult",
    # Request Schemas
    "LoginRequest",
    "EmployeeCreate",
    "EmployeeUpdate",
    "PayrollTemplateCreate",
    "PayrollTemplateUpdate",
    "PayrollCreate",
    "PayrollUpdate",
    "SignatureRecord",
    "ResignationCreate",
    "ResignationUpdate",
    "ResignationSignRequest",
    "ResignationReportCreate",
    "ResignationReportUpdate",
    # Response Schemas
    "LoginResponse",
]
