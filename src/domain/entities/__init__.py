"""Domain Entities - Core business objects."""

from .customer import Address, Customer, CustomerProfile
from .payment_method import (
    CardDetails,
    CardExpiry,
    PaymentMethod,
    PaymentMethodList,
)

__all__ = [
    "Address",
    "Customer",
    "CustomerProfile",
    "CardDetails",
    "CardExpiry",
    "PaymentMethod",
    "PaymentMethodList",
]
