"""Customer entities mirrored from the payment gateway."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Address:
    """Billing address passed through to the gateway."""

    line1: str
    city: str
    state: str
    postal_code: str
    country: str
    line2: str = ""

    def to_dict(self) -> dict:
        """Convert to the gateway's address shape."""
        return {
            "line1": self.line1,
            "line2": self.line2,
            "city": self.city,
            "state": self.state,
            "postal_code": self.postal_code,
            "country": self.country,
        }


@dataclass(frozen=True)
class CustomerProfile:
    """The writable attributes of a gateway customer."""

    name: str
    email: str
    phone: str
    address: Address

    def to_dict(self) -> dict:
        """Convert to gateway request parameters."""
        return {
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "address": self.address.to_dict(),
        }


@dataclass(frozen=True)
class Customer:
    """
    A customer record as held by the gateway.

    The gateway is the system of record; ``data`` keeps the full
    object so it can be returned to callers unchanged.
    """

    id: str
    default_payment_method_id: Optional[str] = None
    data: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_gateway(cls, data: Dict[str, Any]) -> "Customer":
        invoice_settings = data.get("invoice_settings") or {}
        default_method = invoice_settings.get("default_payment_method")

        # May be expanded into a full payment method object
        if isinstance(default_method, dict):
            default_method = default_method.get("id")

        return cls(
            id=data["id"],
            default_payment_method_id=default_method,
            data=data,
        )

    def to_dict(self) -> dict:
        return dict(self.data)
