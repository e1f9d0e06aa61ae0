"""Card lifecycle policy violations."""

from .base import DomainException


class CardPolicyViolation(DomainException):
    """Raised when a card deletion would break the customer's card rules."""


class EmptyCardSetException(CardPolicyViolation):
    """Raised when the customer has no cards at all."""

    def __init__(self, customer_id: str):
        super().__init__(
            message="You cannot delete the last card, should have at-least one card",
            code="EMPTY_CARD_SET",
        )
        self.customer_id = customer_id


class LastActiveCardException(CardPolicyViolation):
    """Raised when deleting the target would leave no active card."""

    def __init__(self, payment_method_id: str):
        super().__init__(
            message="You should have at-least one active card",
            code="LAST_ACTIVE_CARD",
        )
        self.payment_method_id = payment_method_id


class InvalidCardReferenceException(CardPolicyViolation):
    """Raised when the target card is not one of the customer's cards."""

    def __init__(self, payment_method_id: str):
        super().__init__(
            message="Invalid request to delete a card",
            code="INVALID_CARD_REFERENCE",
        )
        self.payment_method_id = payment_method_id
