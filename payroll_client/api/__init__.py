from payroll_client.api.client import PayrollAPI, with_query
from payroll_client.api.manager import UNKNOWN_IP, PayrollManager

__all__ = ["PayrollAPI", "PayrollManager", "UNKNOWN_IP", "with_query"]
