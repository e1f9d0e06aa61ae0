"""Application services (use cases)."""

from .customer_service import CustomerService
from .card_service import CardService

__all__ = [
    "CustomerService",
    "CardService",
]
