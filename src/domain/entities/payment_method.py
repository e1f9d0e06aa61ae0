"""Payment method (card) entities."""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class CardExpiry:
    """
    Expiry month/year of a card.

    Comparison is numeric on (year, month).
    """

    month: int
    year: int

    def is_active_on(self, today: date) -> bool:
        """A card is active while its expiry is after the current month."""
        return (self.year, self.month) > (today.year, today.month)


@dataclass(frozen=True)
class CardDetails:
    """Raw card data supplied when creating a payment method. Never read back."""

    number: str
    exp_month: int
    exp_year: int
    cvc: str

    def to_dict(self) -> dict:
        return {
            "number": self.number,
            "exp_month": self.exp_month,
            "exp_year": self.exp_year,
            "cvc": self.cvc,
        }


@dataclass(frozen=True)
class PaymentMethod:
    """A tokenized funding instrument held by the gateway."""

    id: str
    type: str
    customer_id: Optional[str] = None
    expiry: Optional[CardExpiry] = None
    data: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_gateway(cls, data: Dict[str, Any]) -> "PaymentMethod":
        card = data.get("card") or {}
        expiry = None
        if card.get("exp_month") is not None and card.get("exp_year") is not None:
            expiry = CardExpiry(
                month=int(card["exp_month"]),
                year=int(card["exp_year"]),
            )

        customer = data.get("customer")
        if isinstance(customer, dict):
            customer = customer.get("id")

        return cls(
            id=data["id"],
            type=data.get("type", ""),
            customer_id=customer,
            expiry=expiry,
            data=data,
        )

    def is_active_on(self, today: date) -> bool:
        """Methods without an expiry (e.g. bank accounts) never expire."""
        if self.expiry is None:
            return True
        return self.expiry.is_active_on(today)

    def to_dict(self, is_default: Optional[bool] = None) -> dict:
        """Convert to the pass-through response shape."""
        result = dict(self.data)
        if is_default is not None:
            result["default"] = is_default
        return result


@dataclass(frozen=True)
class PaymentMethodList:
    """One page of a customer's payment methods."""

    data: List[PaymentMethod]
    has_more: bool = False
    url: str = "/v1/payment_methods"

    @classmethod
    def from_gateway(cls, data: Dict[str, Any]) -> "PaymentMethodList":
        return cls(
            data=[PaymentMethod.from_gateway(item) for item in data.get("data", [])],
            has_more=bool(data.get("has_more", False)),
            url=data.get("url", "/v1/payment_methods"),
        )
