"""
Fixtures for integration tests.

Provides:
- Test client for the FastAPI app
- In-memory payment gateway seeded with a customer
- Stripe HTTP stub behind the real HttpStripeClient
"""

from datetime import date
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport, MockTransport

from src.main import app
from src.application.services import CardService
from src.core.dependencies import get_card_service, get_gateway_client
from src.domain.interfaces import PaymentGatewayClient
from src.infrastructure.clients import HttpStripeClient
from tests.fakes import FakeGatewayClient, StripeStub

TODAY = date(2024, 1, 15)


# =============================================================================
# Gateway Fixtures
# =============================================================================

@pytest.fixture
def gateway() -> FakeGatewayClient:
    """Create an in-memory gateway with one customer, cus_1."""
    gateway = FakeGatewayClient()
    gateway.add_customer(
        "cus_1",
        name="Jenny Rosen",
        email="jenny.rosen@example.com",
        phone="5555550100",
    )
    return gateway


# =============================================================================
# App Client Fixtures
# =============================================================================

def _override_dependencies(gateway: PaymentGatewayClient) -> None:
    def override_get_gateway_client():
        return gateway

    def override_get_card_service():
        return CardService(gateway_client=gateway, today=lambda: TODAY)

    app.dependency_overrides[get_gateway_client] = override_get_gateway_client
    app.dependency_overrides[get_card_service] = override_get_card_service


@pytest_asyncio.fixture
async def client(gateway: FakeGatewayClient) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client backed by the in-memory gateway.

    Card rules are evaluated as of 2024-01-15.
    """
    _override_dependencies(gateway)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def lenient_client(gateway: FakeGatewayClient) -> AsyncGenerator[AsyncClient, None]:
    """Like ``client``, but returns 500 responses instead of raising app errors."""
    _override_dependencies(gateway)

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def stripe_stub() -> StripeStub:
    """Create a Stripe HTTP stub with no payment methods."""
    return StripeStub()


@pytest_asyncio.fixture
async def stripe_client(stripe_stub: StripeStub) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client whose gateway is the real HttpStripeClient.

    Stripe itself is served by ``stripe_stub`` over httpx.MockTransport.
    """
    gateway = HttpStripeClient(
        api_key="sk_test_123",
        base_url="https://stripe.test/v1",
        transport=MockTransport(stripe_stub),
    )
    _override_dependencies(gateway)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# =============================================================================
# Helper Fixtures
# =============================================================================

@pytest.fixture
def customer_body() -> dict:
    """A valid create-customer request body."""
    return {
        "name": "Jenny Rosen",
        "email": "jenny.rosen@example.com",
        "phone": "5555550100",
        "addressLine1": "510 Townsend St",
        "addressLine2": "",
        "city": "San Francisco",
        "state": "CA",
        "postalCode": "94103",
        "country": "US",
    }


@pytest.fixture
def card_body() -> dict:
    """A valid add-card request body for cus_1."""
    return {
        "stripeCustomerId": "cus_1",
        "type": "card",
        "cardNumber": "4242424242424242",
        "expiryMonth": 8,
        "expiryYear": 2030,
        "cvc": "314",
    }
