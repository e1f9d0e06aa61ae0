"""Pydantic schemas for API request/response validation."""

from .envelope import ApiResponse
from .customer import CustomerCreateSchema, CustomerUpdateSchema
from .card import AddCardSchema, CardReferenceSchema

__all__ = [
    "ApiResponse",
    "CustomerCreateSchema",
    "CustomerUpdateSchema",
    "AddCardSchema",
    "CardReferenceSchema",
]
