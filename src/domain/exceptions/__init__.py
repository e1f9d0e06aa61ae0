"""Domain Exceptions - Business rule violations and gateway errors."""

from .base import DomainException
from .gateway import (
    GatewayException,
    GatewayTimeoutException,
    ResourceNotFoundException,
)
from .card import (
    CardPolicyViolation,
    EmptyCardSetException,
    LastActiveCardException,
    InvalidCardReferenceException,
)

__all__ = [
    "DomainException",
    "GatewayException",
    "GatewayTimeoutException",
    "ResourceNotFoundException",
    "CardPolicyViolation",
    "EmptyCardSetException",
    "LastActiveCardException",
    "InvalidCardReferenceException",
]
