"""External client interfaces."""

from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities import (
    CardDetails,
    Customer,
    CustomerProfile,
    PaymentMethod,
    PaymentMethodList,
)


class PaymentGatewayClient(ABC):
    """
    Abstract client for the payment gateway.

    Every operation is a single pass-through call. Gateway errors are
    raised as GatewayException; nothing is retried or cached.
    """

    @abstractmethod
    async def create_customer(self, profile: CustomerProfile) -> Customer:
        """Create a customer from the given profile."""
        ...

    @abstractmethod
    async def get_customer(self, customer_id: str) -> Customer:
        """
        Fetch a customer by id.

        Raises:
            ResourceNotFoundException: If the id is unknown to the gateway
        """
        ...

    @abstractmethod
    async def update_customer(
        self,
        customer_id: str,
        profile: CustomerProfile,
    ) -> Customer:
        """Replace the customer's profile fields."""
        ...

    @abstractmethod
    async def add_payment_method(
        self,
        card: CardDetails,
        method_type: str = "card",
    ) -> PaymentMethod:
        """Create a payment method. It is not attached to anyone yet."""
        ...

    @abstractmethod
    async def attach_payment_method(
        self,
        payment_method_id: str,
        customer_id: str,
    ) -> None:
        """Attach an existing payment method to a customer."""
        ...

    @abstractmethod
    async def list_payment_methods(
        self,
        customer_id: str,
        method_type: str = "card",
        limit: Optional[int] = None,
        starting_after: Optional[str] = None,
    ) -> PaymentMethodList:
        """
        List a customer's payment methods of one type.

        Args:
            customer_id: The customer's identifier
            method_type: Payment method type, "card" or "us_bank_account"
            limit: Page size, the configured default (8) when omitted
            starting_after: Cursor, id of the last method of the previous page
        """
        ...

    @abstractmethod
    async def set_default_payment_method(
        self,
        customer_id: str,
        payment_method_id: str,
    ) -> Customer:
        """Make the payment method the customer's invoice default."""
        ...

    @abstractmethod
    async def retrieve_payment_method(self, payment_method_id: str) -> PaymentMethod:
        """Fetch one payment method by id."""
        ...

    @abstractmethod
    async def detach_payment_method(self, payment_method_id: str) -> PaymentMethod:
        """Detach a payment method from its customer."""
        ...
