"""Default payment method annotation."""

from typing import Iterable, List, Optional

from src.domain.entities import PaymentMethod


def annotate_default(
    methods: Iterable[PaymentMethod],
    default_payment_method_id: Optional[str],
) -> List[dict]:
    """
    Render payment methods with a ``default`` flag.

    Exactly the method whose id equals the customer's default is marked
    true; with no default configured, every method is false.
    """
    return [
        method.to_dict(
            is_default=default_payment_method_id is not None
            and method.id == default_payment_method_id
        )
        for method in methods
    ]
