"""
Decline reason translator.

Maps gateway card-decline codes to customer-facing explanations.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Optional

import structlog

from src.domain.exceptions import GatewayException

logger = structlog.get_logger(__name__)

CARD_DECLINED = "card_declined"

DECLINED_WITH_UNKNOWN_REASON = (
    "The card has been declined for an unknown reason, please contact your "
    "card issuer for more information."
)
INTERNAL_SERVER_ERROR = "Internal Server Error"

_INCORRECT_CVC = "The CVC number is incorrect. You should try again using the correct CVC."
_INCORRECT_CARD_NUMBER = (
    "The card number is incorrect. You should try again using the correct card number."
)
_INCORRECT_PIN = "The PIN entered is incorrect. You should try again using the correct PIN."
_PIN_REQUIRED = (
    "The card has been declined as it requires a PIN. Please try again by "
    "inserting your card and entering a PIN."
)
_CANNOT_BE_USED = (
    "The card cannot be used to make this payment (it is possible it has been "
    "reported lost or stolen). Please contact your card issuer for more information."
)

DECLINE_MESSAGES: Mapping[str, str] = MappingProxyType({
    "authentication_required": (
        "The card was declined as the transaction requires authentication, please "
        "try again and authenticate the card when prompted during the transaction."
    ),
    "approve_with_id": (
        "The payment cannot be authorized, please try again. If it still cannot be "
        "processed, please contact your card issuer."
    ),
    "call_issuer": DECLINED_WITH_UNKNOWN_REASON,
    "card_not_supported": (
        "The card does not support this type of purchase. Please contact your card "
        "issuer to make sure your card can be used to make this type of purchase."
    ),
    "card_velocity_exceeded": (
        "You have exceeded the balance or credit limit available on your card. "
        "Please contact your card issuer for more information."
    ),
    "currency_not_supported": "Your card does not support the specified currency.",
    "do_not_honor": DECLINED_WITH_UNKNOWN_REASON,
    "do_not_try_again": DECLINED_WITH_UNKNOWN_REASON,
    "duplicate_transaction": (
        "A transaction with identical amount and credit card information was "
        "submitted very recently. Please check to see if a recent payment already exists."
    ),
    "expired_card": "The card has expired, you should use another card.",
    "fraudulent": DECLINED_WITH_UNKNOWN_REASON,
    "generic_decline": DECLINED_WITH_UNKNOWN_REASON,
    "incorrect_number": _INCORRECT_CARD_NUMBER,
    "incorrect_cvc": _INCORRECT_CVC,
    "incorrect_pin": _INCORRECT_PIN,
    "incorrect_zip": (
        "The ZIP/postal code is incorrect. You should try again using the correct "
        "billing ZIP/postal code."
    ),
    "insufficient_funds": (
        "The card has insufficient funds to complete the purchase. You can use an "
        "alternative payment method."
    ),
    "invalid_account": (
        "The card, or account the card is connected to, is invalid. Please contact "
        "your card issuer to check that the card is working correctly."
    ),
    "invalid_amount": (
        "The payment amount is invalid, or exceeds the amount that is allowed. If the "
        "amount appears to be correct, please check with your card issuer that they "
        "can make purchases of that amount."
    ),
    "invalid_cvc": _INCORRECT_CVC,
    "invalid_expiry_year": (
        "The expiration year is invalid. please try again using the correct expiration year."
    ),
    "invalid_number": _INCORRECT_CARD_NUMBER,
    "invalid_pin": _INCORRECT_PIN,
    "issuer_not_available": (
        "The card issuer could not be reached, so the payment could not be authorized. "
        "Please try again. If it still cannot be processed, please contact your card issuer."
    ),
    "lost_card": DECLINED_WITH_UNKNOWN_REASON,
    "merchant_blacklist": DECLINED_WITH_UNKNOWN_REASON,
    "new_account_information_available": (
        "Your card, or account the card is connected to, is invalid. Please contact "
        "your card issuer for more information."
    ),
    "no_action_taken": DECLINED_WITH_UNKNOWN_REASON,
    "not_permitted": (
        "The payment is not permitted., please contact your card issuer for more information."
    ),
    "offline_pin_required": _PIN_REQUIRED,
    "online_or_offline_pin_required": _PIN_REQUIRED,
    "pickup_card": _CANNOT_BE_USED,
    "pin_try_exceeded": (
        "The allowable number of PIN tries has been exceeded. Please use another card "
        "or method of payment."
    ),
    "processing_error": (
        "An error occurred while processing the card. Please try again. If it still "
        "cannot be processed, try again later."
    ),
    "reenter_transaction": (
        "The payment could not be processed by the issuer for an unknown reason. Please "
        "try again. If it still cannot be processed, please contact your card issuer."
    ),
    "restricted_card": _CANNOT_BE_USED,
    "revocation_of_all_authorizations": DECLINED_WITH_UNKNOWN_REASON,
    "revocation_of_authorization": DECLINED_WITH_UNKNOWN_REASON,
    "security_violation": DECLINED_WITH_UNKNOWN_REASON,
    "service_not_allowed": DECLINED_WITH_UNKNOWN_REASON,
    "stolen_card": DECLINED_WITH_UNKNOWN_REASON,
    "stop_payment_order": DECLINED_WITH_UNKNOWN_REASON,
    "testmode_decline": (
        "A test card number was used. A genuine card must be used to make a payment."
    ),
    "transaction_not_allowed": DECLINED_WITH_UNKNOWN_REASON,
    "try_again_later": (
        "The card has been declined for an unknown reason. Please try again. If "
        "subsequent payments are declined, please contact your card issuer for more "
        "information."
    ),
    "withdrawal_count_limit_exceeded": (
        "You have exceeded the balance or credit limit available on your card. You can "
        "use an alternative payment method."
    ),
})


@dataclass(frozen=True)
class DeclineClassification:
    """Result of translating a gateway error."""

    status_code: int
    message: str


def _field(error: Any, *names: str) -> Optional[str]:
    """Read the first present attribute or key among ``names``."""
    for name in names:
        if isinstance(error, Mapping):
            value = error.get(name)
        else:
            value = getattr(error, name, None)
        if value:
            return value
    return None


def decline_message(decline_code: Optional[str]) -> str:
    """Look up the message for a decline code, falling back to the unknown reason."""
    if decline_code in DECLINE_MESSAGES:
        return DECLINE_MESSAGES[decline_code]

    logger.warning("unmapped_decline_code", decline_code=decline_code)
    return DECLINED_WITH_UNKNOWN_REASON


def classify(error: Any) -> DeclineClassification:
    """
    Translate a gateway error into a status code and user-facing message.

    Accepts a GatewayException, or any mapping or object carrying the
    gateway's ``code``, ``decline_code`` (or ``declineCode``) and ``message``.
    """
    if isinstance(error, GatewayException):
        code = error.gateway_code
    else:
        code = _field(error, "code")
    message = _field(error, "message") or INTERNAL_SERVER_ERROR

    if not code:
        return DeclineClassification(status_code=500, message=message)

    if code != CARD_DECLINED:
        return DeclineClassification(status_code=200, message=message)

    decline_code = _field(error, "decline_code", "declineCode")
    return DeclineClassification(status_code=200, message=decline_message(decline_code))
