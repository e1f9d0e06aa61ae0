"""Data transfer objects for card operations."""

from dataclasses import dataclass
from typing import List, Optional

from src.domain.entities import CardDetails, PaymentMethodList
from src.service.cards import annotate_default


@dataclass(frozen=True)
class AddCardRequest:
    """Input data for creating a card and attaching it to a customer."""

    customer_id: str
    card_number: str
    expiry_month: int
    expiry_year: int
    cvc: str
    method_type: str = "card"

    def to_card_details(self) -> CardDetails:
        return CardDetails(
            number=self.card_number,
            exp_month=self.expiry_month,
            exp_year=self.expiry_year,
            cvc=self.cvc,
        )


@dataclass(frozen=True)
class ListCardsRequest:
    """Input data for listing a customer's payment methods."""

    customer_id: str
    method_type: str = "card"
    limit: Optional[int] = None
    starting_after: Optional[str] = None


@dataclass(frozen=True)
class CardListResponse:
    """A page of payment methods with the default flag applied."""

    data: List[dict]
    has_more: bool
    url: str
    object: str = "list"

    @classmethod
    def from_entities(
        cls,
        methods: PaymentMethodList,
        default_payment_method_id: Optional[str],
    ) -> "CardListResponse":
        return cls(
            data=annotate_default(methods.data, default_payment_method_id),
            has_more=methods.has_more,
            url=methods.url,
        )

    def to_dict(self) -> dict:
        return {
            "object": self.object,
            "data": self.data,
            "has_more": self.has_more,
            "url": self.url,
        }
