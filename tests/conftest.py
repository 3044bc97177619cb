"""
Shared fixtures: an in-memory HR service mounted over httpx.ASGITransport,
a stub public-IP lookup, and PayrollAPI / PayrollManager instances wired
to them.
"""

import httpx
import pytest
import pytest_asyncio

from payroll_client.api.client import PayrollAPI
from payroll_client.api.manager import PayrollManager
from payroll_client.core.token_store import TokenStore
from tests.stub_api import (
    ADMIN_PASSWORD,
    ADMIN_USERNAME,
    BASE_URL,
    IP_LOOKUP_URL,
    LOOKUP_IP,
    HRStore,
    create_app,
)


@pytest.fixture
def hr_store():
    return HRStore()


@pytest.fixture
def token_store():
    return TokenStore()


@pytest_asyncio.fixture
async def http_client(hr_store):
    """AsyncClient routed to the stub service."""
    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=create_app(hr_store))) as client:
        yield client


@pytest.fixture
def ip_lookups():
    """Requests received by the stub IP lookup."""
    return []


@pytest_asyncio.fixture
async def ip_lookup_client(ip_lookups):
    def lookup_ip(request: httpx.Request) -> httpx.Response:
        ip_lookups.append(request)
        return httpx.Response(200, json={"ip": LOOKUP_IP})

    async with httpx.AsyncClient(transport=httpx.MockTransport(lookup_ip)) as client:
        yield client


@pytest_asyncio.fixture
async def api(http_client, token_store):
    """PayrollAPI pointed at the stub service, not yet logged in."""
    return PayrollAPI(
        base_url=f"{BASE_URL}/api/v1",
        token_store=token_store,
        http_client=http_client,
    )


@pytest_asyncio.fixture
async def admin_api(api):
    """PayrollAPI logged in as the stub admin."""
    await api.login(ADMIN_USERNAME, ADMIN_PASSWORD)
    return api


@pytest.fixture
def manager(admin_api, ip_lookup_client):
    return PayrollManager(
        api=admin_api,
        user_agent="Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
        ip_lookup_url=IP_LOOKUP_URL,
        ip_lookup_client=ip_lookup_client,
    )


@pytest.fixture
def employee_payload():
    return {
        "name": "Test Employee",
        "employee_no": "TEST001",
        "department": "QA",
        "position": "Test Engineer",
        "email": "test@company.com",
        "phone": "13800138000",
    }
