"""
Card lifecycle policy.

Decides whether a card may be removed from a customer while keeping
at least one card, and at least one active card, on file.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import List, Sequence

from src.domain.entities import PaymentMethod
from src.domain.exceptions import (
    EmptyCardSetException,
    InvalidCardReferenceException,
    LastActiveCardException,
)


class CardState(str, Enum):
    ACTIVE = "active"
    EXPIRED = "expired"


@dataclass(frozen=True)
class CardPartition:
    """A customer's cards split by expiry relative to one date."""

    active: List[PaymentMethod]
    expired: List[PaymentMethod]

    @property
    def active_ids(self) -> List[str]:
        return [card.id for card in self.active]

    @property
    def expired_ids(self) -> List[str]:
        return [card.id for card in self.expired]


def partition_cards(cards: Sequence[PaymentMethod], today: date) -> CardPartition:
    """
    Split cards into active and expired.

    A card is active when its expiry (year, month) is strictly after
    the (year, month) of ``today``.
    """
    active: List[PaymentMethod] = []
    expired: List[PaymentMethod] = []

    for card in cards:
        if card.is_active_on(today):
            active.append(card)
        else:
            expired.append(card)

    return CardPartition(active=active, expired=expired)


def check_card_deletion(
    customer_id: str,
    payment_method_id: str,
    cards: Sequence[PaymentMethod],
    today: date,
) -> CardState:
    """
    Check that ``payment_method_id`` may be detached from the customer.

    Returns the state of the card being removed.

    Raises:
        EmptyCardSetException: The customer has no cards
        LastActiveCardException: The card is the only active one
        InvalidCardReferenceException: The card is not among ``cards``
    """
    if not cards:
        raise EmptyCardSetException(customer_id)

    partition = partition_cards(cards, today)

    # Removing an expired card never reduces usable cards
    if payment_method_id in partition.expired_ids:
        return CardState.EXPIRED

    if payment_method_id in partition.active_ids:
        if len(partition.active) == 1:
            raise LastActiveCardException(payment_method_id)
        return CardState.ACTIVE

    raise InvalidCardReferenceException(payment_method_id)
