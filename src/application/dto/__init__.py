"""Data Transfer Objects for application layer."""

from .result import OperationResult
from .customer import CustomerRequest
from .card import AddCardRequest, ListCardsRequest, CardListResponse

__all__ = [
    "OperationResult",
    "CustomerRequest",
    "AddCardRequest",
    "ListCardsRequest",
    "CardListResponse",
]
