"""
Card policy module: lifecycle rules, default annotation and decline reasons.
"""

from .lifecycle import CardPartition, CardState, partition_cards, check_card_deletion
from .default_payment import annotate_default
from .decline_codes import (
    DECLINE_MESSAGES,
    DECLINED_WITH_UNKNOWN_REASON,
    DeclineClassification,
    classify,
    decline_message,
)

__all__ = [
    # Lifecycle
    "CardPartition",
    "CardState",
    "partition_cards",
    "check_card_deletion",
    # Default annotation
    "annotate_default",
    # Decline reasons
    "DECLINE_MESSAGES",
    "DECLINED_WITH_UNKNOWN_REASON",
    "DeclineClassification",
    "classify",
    "decline_message",
]
