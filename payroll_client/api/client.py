"""
HR service API operations.

One coroutine per resource operation:
- Authentication (login, verify, logout)
- Employee CRUD
- Payroll template CRUD
- Payroll CRUD, batch publish and signatures
- Notifications
- Resignation applications, signatures and reports

Each operation binds an HTTP verb and endpoint path onto the gateway and
returns the parsed JSON body unchanged. No local validation: the server
rejects bad identifiers and payloads, and its errors propagate as-is.
"""

from typing import Any, Iterable, Optional
from urllib.parse import urlencode

import httpx

from payroll_client.core.http import APIGateway
from payroll_client.core.logging import get_logger
from payroll_client.core.token_store import TokenStore
from payroll_client.models.auth import LoginRequest, LoginResponse
from payroll_client.models.resignation import SignerType

logger = get_logger(__name__)

JSONResult = Any


def with_query(path: str, params: Optional[dict[str, Any]] = None) -> str:
    """Append a query string, dropping None values; no `?` when empty."""
    params = {key: value for key, value in (params or {}).items() if value is not None}
    if not params:
        return path
    return f"{path}?{urlencode(params)}"


class PayrollAPI:
    def __init__(
        self,
        base_url: Optional[str] = None,
        token_store: Optional[TokenStore] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        gateway: Optional[APIGateway] = None,
    ):
        self.gateway = gateway or APIGateway(
            base_url=base_url, token_store=token_store, http_client=http_client
        )

    async def __aenter__(self) -> "PayrollAPI":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.gateway.aclose()

    @property
    def token_store(self) -> TokenStore:
        return self.gateway.token_store

    async def request(self, endpoint: str, method: str = "GET", body: Any = None) -> JSONResult:
        return await self.gateway.request(endpoint, method=method, body=body)

    # =========================================================================
    # Authentication
    # =========================================================================

    async def login(
        self, username: str, password: str, remember: bool = False
    ) -> LoginResponse:
        """Log in and store the returned token for subsequent requests."""
        result = await self.request(
            "/auth/login",
            "POST",
            LoginRequest(username=username, password=password, remember=remember),
        )
        login_response = LoginResponse.model_validate(result)
        await self.token_store.set_token(login_response.token)
        logger.info(f"Logged in as {login_response.username}")
        return login_response

    async def verify_token(self) -> JSONResult:
        return await self.request("/auth/verify", "POST")

    async def logout(self) -> None:
        """Forget the stored token. The server keeps no session to end."""
        await self.token_store.clear_token()
        logger.info("Logged out, token cleared")

    async def get_client_ip(self) -> JSONResult:
        """Server-side view of the caller's IP and device."""
        return await self.request("/client-ip")

    # =========================================================================
    # Employees
    # =========================================================================

    async def get_employees(self, **filters: Any) -> JSONResult:
        return await self.request(with_query("/employees", filters))

    async def create_employee(self, employee_data: Any) -> JSONResult:
        return await self.request("/employees", "POST", employee_data)

    async def get_employee(self, employee_id: int | str) -> JSONResult:
        return await self.request(f"/employees/{employee_id}")

    async def update_employee(self, employee_id: int | str, employee_data: Any) -> JSONResult:
        return await self.request(f"/employees/{employee_id}", "PUT", employee_data)

    async def delete_employee(self, employee_id: int | str) -> JSONResult:
        return await self.request(f"/employees/{employee_id}", "DELETE")

    # =========================================================================
    # Payroll Templates
    # =========================================================================

    async def get_templates(self, **filters: Any) -> JSONResult:
        return await self.request(with_query("/templates", filters))

    async def create_template(self, template_data: Any) -> JSONResult:
        return await self.request("/templates", "POST", template_data)

    async def update_template(self, template_id: int | str, template_data: Any) -> JSONResult:
        return await self.request(f"/templates/{template_id}", "PUT", template_data)

    async def delete_template(self, template_id: int | str) -> JSONResult:
        return await self.request(f"/templates/{template_id}", "DELETE")

    # =========================================================================
    # Payrolls
    # =========================================================================

    async def get_payrolls(self, **filters: Any) -> JSONResult:
        """List payrolls. Server filters: status, period, employee_id."""
        return await self.request(with_query("/payrolls", filters))

    async def create_payroll(self, payroll_data: Any) -> JSONResult:
        return await self.request("/payrolls", "POST", payroll_data)

    async def get_payroll(self, payroll_id: str) -> JSONResult:
        return await self.request(f"/payrolls/{payroll_id}")

    async def update_payroll(self, payroll_id: str, payroll_data: Any) -> JSONResult:
        return await self.request(f"/payrolls/{payroll_id}", "PUT", payroll_data)

    async def delete_payroll(self, payroll_id: str) -> JSONResult:
        return await self.request(f"/payrolls/{payroll_id}", "DELETE")

    async def publish_payrolls(
        self, payroll_ids: Iterable[str], notify_employees: bool = True
    ) -> JSONResult:
        """Publish drafts in one batch. An empty list is left for the server to reject."""
        return await self.request(
            "/payrolls/publish",
            "POST",
            {
                "payroll_ids": list(payroll_ids),
                "notify_employees": notify_employees,
            },
        )

    async def get_employee_payrolls(
        self, employee_id: int | str, period: Optional[str] = None
    ) -> JSONResult:
        return await self.request(
            with_query(f"/payrolls/employee/{employee_id}", {"period": period or None})
        )

    async def sign_payroll(self, signature_data: Any) -> JSONResult:
        return await self.request("/payrolls/sign", "POST", signature_data)

    async def get_payroll_signature(self, payroll_id: str) -> JSONResult:
        return await self.request(f"/payrolls/{payroll_id}/signature")

    # =========================================================================
    # Notifications
    # =========================================================================

    async def get_notifications(self, status: Optional[str] = None) -> JSONResult:
        return await self.request(with_query("/notifications", {"status": status or None}))

    async def resend_notification(self, notification_id: int) -> JSONResult:
        # Every call is a new send attempt server-side
        return await self.request(
            "/notifications/resend", "POST", {"notification_id": notification_id}
        )

    # =========================================================================
    # Resignations
    # =========================================================================

    async def get_resignations(self, **filters: Any) -> JSONResult:
        return await self.request(with_query("/resignations", filters))

    async def create_resignation(self, resignation_data: Any) -> JSONResult:
        return await self.request("/resignations", "POST", resignation_data)

    async def get_resignation(self, resignation_id: str) -> JSONResult:
        return await self.request(f"/resignations/{resignation_id}")

    async def update_resignation(self, resignation_id: str, resignation_data: Any) -> JSONResult:
        return await self.request(f"/resignations/{resignation_id}", "PUT", resignation_data)

    async def delete_resignation(self, resignation_id: str) -> JSONResult:
        return await self.request(f"/resignations/{resignation_id}", "DELETE")

    async def approve_resignation(self, resignation_id: str, comments: str = "") -> JSONResult:
        return await self.request(
            f"/resignations/{resignation_id}/approve",
            "POST",
            {"approval_comments": comments},
        )

    async def reject_resignation(self, resignation_id: str, comments: str = "") -> JSONResult:
        return await self.request(
            f"/resignations/{resignation_id}/reject",
            "POST",
            {"approval_comments": comments},
        )

    async def generate_sign_token(
        self, resignation_id: str, signer_type: SignerType | str
    ) -> JSONResult:
        """Create (or reuse) a one-time signing link for a signer."""
        return await self.request(
            f"/resignations/{resignation_id}/generate-sign-token",
            "POST",
            {"signer_type": SignerType(signer_type).value},
        )

    async def sign_resignation(
        self,
        signature_data: Any,
        token: Optional[str] = None,
        signer_type: SignerType | str | None = None,
    ) -> JSONResult:
        params = {
            "token": token,
            "type": SignerType(signer_type).value if signer_type else None,
        }
        return await self.request(
            with_query("/resignations/sign", params), "POST", signature_data
        )

    async def get_resignation_signatures(self, resignation_id: str) -> JSONResult:
        return await self.request(f"/resignations/{resignation_id}/signatures")

    # =========================================================================
    # Resignation Reports
    # =========================================================================

    async def get_resignation_reports(self) -> JSONResult:
        return await self.request("/resignation-reports")

    async def create_resignation_report(self, report_data: Any) -> JSONResult:
        return await self.request("/resignation-reports", "POST", report_data)

    async def get_resignation_report(self, report_id: int | str) -> JSONResult:
        return await self.request(f"/resignation-reports/{report_id}")

    async def update_resignation_report(self, report_id: int | str, report_data: Any) -> JSONResult:
        return await self.request(f"/resignation-reports/{report_id}", "PUT", report_data)

    async def delete_resignation_report(self, report_id: int | str) -> JSONResult:
        return await self.request(f"/resignation-reports/{report_id}", "DELETE")
