"""
Card Gateway - Stripe Customer & Card Service

A FastAPI-based backend that forwards customer and payment-card
operations to Stripe and shapes the results into a uniform envelope.
"""

__version__ = "0.1.0"
