"""
HR Payroll API Client.

Async client for the HR administration service: employees, payroll
templates, payroll slips with e-signatures, notifications and the
resignation workflow.
"""

from payroll_client.api.client import PayrollAPI
from payroll_client.api.manager import UNKNOWN_IP, PayrollManager
from payroll_client.core.exceptions import (
    PayrollClientError,
    RequestError,
    TransportError,
)
from payroll_client.core.http import APIGateway
from payroll_client.core.payroll import PayrollDataProcessor

__version__ = "1.0.0"

__all__ = [
    "APIGateway",
    "PayrollAPI",
    "PayrollManager",
    "PayrollDataProcessor",
    "PayrollClientError",
    "RequestError",
    "TransportError",
    "UNKNOWN_IP",
]
