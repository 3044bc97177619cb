"""
Payroll workflows built on PayrollAPI.

Each workflow logs failures and re-raises them unchanged. The one exception
is the external IP lookup during signing: it degrades to UNKNOWN_IP instead
of failing the signature.
"""

from typing import Any, Iterable, Optional

import httpx
from pydantic import BaseModel

from payroll_client.api.client import PayrollAPI
from payroll_client.core.config import settings
from payroll_client.core.device import DeviceType, classify_device
from payroll_client.core.logging import get_logger
from payroll_client.core.payroll import PayrollDataLike
from payroll_client.core.signature import SignatureSurface
from payroll_client.models.payroll import SignatureRecord

logger = get_logger(__name__)

UNKNOWN_IP = "unknown IP"


class PayrollManager:
    def __init__(
        self,
        api: Optional[PayrollAPI] = None,
        user_agent: Optional[str] = None,
        ip_lookup_url: Optional[str] = None,
        ip_lookup_timeout: float = settings.IP_LOOKUP_TIMEOUT,
        ip_lookup_client: Optional[httpx.AsyncClient] = None,
    ):
        self.api = api or PayrollAPI()
        self.user_agent = user_agent or settings.USER_AGENT
        self.ip_lookup_url = ip_lookup_url or settings.IP_LOOKUP_URL
        self.ip_lookup_timeout = ip_lookup_timeout
        # Separate from the HR API client; its credentials never reach the lookup
        self.ip_lookup_client = ip_lookup_client

    async def create_new_payroll(
        self,
        employee_id: int,
        period: str,
        template_id: int,
        payroll_data: PayrollDataLike,
    ) -> Any:
        """Create a draft payroll and return the created record.

        The payload goes to the server as given; malformed periods or
        amounts come back as the server's RequestError.
        """
        if isinstance(payroll_data, BaseModel):
            payroll_data = payroll_data.model_dump(mode="json")

        try:
            result = await self.api.create_payroll(
                {
                    "employee_id": employee_id,
                    "period": period,
                    "template_id": template_id,
                    "payroll_data": payroll_data,
                }
            )
            logger.info(f"Payroll created for employee {employee_id}, period {period}")
            return result["data"]
        except Exception as e:
            logger.error(f"Failed to create payroll for employee {employee_id}: {e}")
            raise

    async def publish_payrolls_batch(
        self, payroll_ids: Iterable[str], should_notify: bool = True
    ) -> Any:
        try:
            result = await self.api.publish_payrolls(payroll_ids, should_notify)
            logger.info(f"Payrolls published: {result.get('message')}")
            return result
        except Exception as e:
            logger.error(f"Failed to publish payrolls: {e}")
            raise

    async def handle_payroll_signature(
        self, payroll_id: str, signature_surface: SignatureSurface
    ) -> Any:
        """
        Sign a payroll with a captured signature.

        Steps:
        1. Export the signature surface as a data URL
        2. Look up the public IP (best effort)
        3. Classify the device from the user agent
        4. Submit the signature record

        Returns:
            The stored signature as returned by the server
        """
        try:
            signature = SignatureRecord(
                payroll_id=str(payroll_id),
                signature_data=signature_surface.to_data_url(),
                ip_address=await self.get_client_ip(),
                user_agent=self.user_agent,
                device_info=self.get_device_info().value,
            )

            result = await self.api.sign_payroll(signature)
            logger.info(f"Payroll {payroll_id} signed: {result.get('message')}")
            return result.get("data")
        except Exception as e:
            logger.error(f"Failed to sign payroll {payroll_id}: {e}")
            raise

    async def _lookup_ip(self, client: httpx.AsyncClient) -> str:
        response = await client.get(self.ip_lookup_url, timeout=self.ip_lookup_timeout)
        response.raise_for_status()
        return str(response.json()["ip"])

    async def get_client_ip(self) -> str:
        """Public IP from the external lookup service, or UNKNOWN_IP."""
        try:
            if self.ip_lookup_client is not None:
                return await self._lookup_ip(self.ip_lookup_client)
            async with httpx.AsyncClient() as client:
                return await self._lookup_ip(client)
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
            logger.warning(f"IP lookup failed, using placeholder: {e}")
            return UNKNOWN_IP

    def get_device_info(self) -> DeviceType:
        return classify_device(self.user_agent)

    async def get_employee_payroll_history(self, employee_id: int | str) -> Any:
        try:
            result = await self.api.get_employee_payrolls(employee_id)
            return result["data"]
        except Exception as e:
            logger.error(f"Failed to fetch payroll history for employee {employee_id}: {e}")
            raise
