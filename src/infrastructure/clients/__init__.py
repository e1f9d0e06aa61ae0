"""External API client implementations."""

from .stripe_client import HttpStripeClient

__all__ = [
    "HttpStripeClient",
]
