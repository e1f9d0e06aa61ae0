"""Customer service - handles customer create/retrieve/update use cases."""

import structlog

from src.application.dto import CustomerRequest, OperationResult
from src.domain.interfaces import PaymentGatewayClient

logger = structlog.get_logger(__name__)


class CustomerService:
    """
    Application service for gateway customer use cases.

    The gateway is the system of record; nothing is stored locally.
    """

    def __init__(self, gateway_client: PaymentGatewayClient):
        self._gateway = gateway_client

    async def create_customer(self, request: CustomerRequest) -> OperationResult:
        """
        Create a customer on the gateway.

        Raises:
            GatewayException: If the gateway rejects the customer
        """
        customer = await self._gateway.create_customer(request.to_profile())

        logger.info("customer_created", customer_id=customer.id)

        return OperationResult(
            message="Stripe customer create successfully",
            response=customer.to_dict(),
        )

    async def get_customer(self, customer_id: str) -> OperationResult:
        """
        Retrieve a customer by id.

        Raises:
            ResourceNotFoundException: If the customer does not exist
        """
        customer = await self._gateway.get_customer(customer_id)

        logger.info("customer_retrieved", customer_id=customer.id)

        return OperationResult(
            message="Stripe customer retrieved successfully",
            response=customer.to_dict(),
        )

    async def update_customer(
        self,
        customer_id: str,
        request: CustomerRequest,
    ) -> OperationResult:
        """Overwrite the customer's profile fields on the gateway."""
        customer = await self._gateway.update_customer(customer_id, request.to_profile())

        logger.info("customer_updated", customer_id=customer.id)

        return OperationResult(
            message="Stripe customer updated successfully",
            response=customer.to_dict(),
        )
