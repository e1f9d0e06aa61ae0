"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends

from src.application.services import CardService, CustomerService
from src.domain.interfaces import PaymentGatewayClient
from src.infrastructure.clients import HttpStripeClient


# External client dependencies
def get_gateway_client() -> PaymentGatewayClient:
    """Get a PaymentGatewayClient instance."""
    return HttpStripeClient()


# Service dependencies
def get_customer_service(
    gateway_client: Annotated[PaymentGatewayClient, Depends(get_gateway_client)],
) -> CustomerService:
    """Get a CustomerService instance."""
    return CustomerService(gateway_client=gateway_client)


def get_card_service(
    gateway_client: Annotated[PaymentGatewayClient, Depends(get_gateway_client)],
) -> CardService:
    """Get a CardService instance."""
    return CardService(gateway_client=gateway_client)
