"""
Payroll Client Core Module.

Exports core utilities and configurations.
"""

from payroll_client.core.config import settings
from payroll_client.core.device import DeviceType, classify_device
from payroll_client.core.exceptions import (
    PayrollClientError,
    RequestError,
    TransportError,
)
from payroll_client.core.http import APIGateway
from payroll_client.core.logging import get_logger
from payroll_client.core.payroll import (
    DEDUCTION_ITEMS,
    GROSS_ITEMS,
    PayrollDataProcessor,
)
from payroll_client.core.signature import PNGSignature, SignatureSurface, encode_data_url
from payroll_client.core.token_store import (
    RedisClient,
    RedisTokenStore,
    TokenStore,
    get_token_store,
)

__all__ = [
    # Config
    "settings",
    "get_logger",
    # Errors
    "PayrollClientError",
    "RequestError",
    "TransportError",
    # Gateway
    "APIGateway",
    # Credentials
    "TokenStore",
    "RedisTokenStore",
    "RedisClient",
    "get_token_store",
    # Payroll
    "PayrollDataProcessor",
    "GROSS_ITEMS",
    "DEDUCTION_ITEMS",
    # Signatures
    "DeviceType",
    "classify_device",
    "SignatureSurface",
    "PNGSignature",
    "encode_data_url",
]
