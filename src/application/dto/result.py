"""Typed outcome of an application use case."""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class OperationResult:
    """
    Successful outcome of a use case, ready for the response envelope.

    Expected failures do not produce an OperationResult; they are raised
    as domain exceptions and rendered by the exception handlers.
    """

    message: Optional[str] = None
    response: Optional[Dict[str, Any]] = None
    success: bool = True
