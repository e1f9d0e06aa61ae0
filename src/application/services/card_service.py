"""Card service - orchestrates payment method use cases."""

from datetime import date
from typing import Callable, List

import structlog

from src.application.dto import (
    AddCardRequest,
    CardListResponse,
    ListCardsRequest,
    OperationResult,
)
from src.core.metrics import record_card_added, record_card_deletion
from src.domain.entities import PaymentMethod
from src.domain.exceptions import (
    CardPolicyViolation,
    EmptyCardSetException,
    InvalidCardReferenceException,
    LastActiveCardException,
)
from src.domain.interfaces import PaymentGatewayClient
from src.service.cards import CardState, check_card_deletion

logger = structlog.get_logger(__name__)

_VIOLATION_OUTCOMES = {
    EmptyCardSetException: "empty_card_set",
    LastActiveCardException: "last_active_card",
    InvalidCardReferenceException: "invalid_card",
}


class CardService:
    """
    Application service for card use cases.

    Card deletion reads the customer's cards and then detaches without
    any lock, so two concurrent deletions for one customer can both pass
    the last-active-card check.
    """

    CARD_TYPE = "card"
    PAGE_SIZE = 100

    def __init__(
        self,
        gateway_client: PaymentGatewayClient,
        today: Callable[[], date] = date.today,
    ):
        self._gateway = gateway_client
        self._today = today

    async def add_card(self, request: AddCardRequest) -> OperationResult:
        """
        Create a card on the gateway and attach it to the customer.

        A card whose attach fails is left unattached on the gateway.

        Raises:
            GatewayException: If creation or attachment fails
        """
        log = logger.bind(customer_id=request.customer_id)

        payment_method = await self._gateway.add_payment_method(
            request.to_card_details(),
            method_type=request.method_type,
        )
        log.info("payment_method_created", payment_method_id=payment_method.id)

        await self._gateway.attach_payment_method(payment_method.id, request.customer_id)
        log.info("payment_method_attached", payment_method_id=payment_method.id)

        record_card_added()

        return OperationResult(
            message="Payment method added successfully",
            response=payment_method.to_dict(),
        )

    async def list_cards(self, request: ListCardsRequest) -> OperationResult:
        """
        List a customer's payment methods, flagging the default one.

        Reads the customer first for its default payment method, then the
        requested page of methods.
        """
        customer = await self._gateway.get_customer(request.customer_id)

        methods = await self._gateway.list_payment_methods(
            request.customer_id,
            method_type=request.method_type,
            limit=request.limit,
            starting_after=request.starting_after,
        )

        logger.info(
            "payment_methods_listed",
            customer_id=request.customer_id,
            method_type=request.method_type,
            count=len(methods.data),
        )

        listing = CardListResponse.from_entities(methods, customer.default_payment_method_id)
        return OperationResult(response=listing.to_dict())

    async def delete_card(self, customer_id: str, payment_method_id: str) -> OperationResult:
        """
        Detach a card if the lifecycle policy allows it.

        Raises:
            EmptyCardSetException: The customer has no cards
            LastActiveCardException: The card is the customer's only active card
            InvalidCardReferenceException: The card does not belong to the customer
            GatewayException: If listing or detaching fails
        """
        log = logger.bind(customer_id=customer_id, payment_method_id=payment_method_id)

        cards = await self._list_all_cards(customer_id)

        try:
            state = check_card_deletion(
                customer_id,
                payment_method_id,
                cards,
                self._today(),
            )
        except CardPolicyViolation as e:
            record_card_deletion(_VIOLATION_OUTCOMES.get(type(e), "rejected"))
            log.warning("card_deletion_rejected", code=e.code, reason=e.message)
            raise

        payment_method = await self._gateway.detach_payment_method(payment_method_id)

        record_card_deletion(
            "detached_expired" if state == CardState.EXPIRED else "detached_active"
        )
        log.info("card_deleted", card_state=state.value)

        return OperationResult(
            message="PaymentMethod object detached from a Customer successfully.",
            response=payment_method.to_dict(),
        )

    async def set_default_card(
        self,
        customer_id: str,
        payment_method_id: str,
    ) -> OperationResult:
        """Make the payment method the customer's invoice default."""
        await self._gateway.set_default_payment_method(customer_id, payment_method_id)

        logger.info(
            "default_payment_method_set",
            customer_id=customer_id,
            payment_method_id=payment_method_id,
        )

        return OperationResult(message="Payment method set default for payment")

    async def get_card(self, payment_method_id: str) -> OperationResult:
        """Fetch one payment method."""
        payment_method = await self._gateway.retrieve_payment_method(payment_method_id)

        return OperationResult(
            message="Payment method fetched successfully",
            response=payment_method.to_dict(),
        )

    async def _list_all_cards(self, customer_id: str) -> List[PaymentMethod]:
        """Page through every card attached to the customer."""
        cards: List[PaymentMethod] = []
        starting_after = None

        while True:
            page = await self._gateway.list_payment_methods(
                customer_id,
                method_type=self.CARD_TYPE,
                limit=self.PAGE_SIZE,
                starting_after=starting_after,
            )
            cards.extend(page.data)

            if not page.has_more or not page.data:
                return cards
            starting_after = page.data[-1].id
