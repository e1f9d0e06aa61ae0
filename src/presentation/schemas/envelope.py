"""Pydantic schema for the uniform response envelope."""

from typing import Any, Optional

from pydantic import BaseModel, Field

from src.application.dto import OperationResult


class ApiResponse(BaseModel):
    """
    Envelope returned by every API endpoint.

    Expected failures (validation, gateway, card policy) are reported with
    HTTP 200 and ``success`` false.
    """

    success: bool = Field(
        ...,
        description="Whether the operation succeeded",
    )
    message: Optional[str] = Field(
        None,
        description="Human-readable outcome",
        examples=["Payment method added successfully"],
    )
    error: Optional[Any] = Field(
        None,
        description="Field-level validation errors, keyed by field name",
        examples=[{"email": '"email" must be a valid email'}],
    )
    response: Optional[Any] = Field(
        None,
        description="The gateway object(s) produced by the operation",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "success": False,
                    "message": "You should have at-least one active card",
                },
            ]
        }
    }

    @classmethod
    def from_result(cls, result: OperationResult) -> "ApiResponse":
        fields = {"success": result.success}
        if result.message is not None:
            fields["message"] = result.message
        if result.response is not None:
            fields["response"] = result.response
        return cls(**fields)

    @classmethod
    def failure(cls, message: str, error: Any = None) -> "ApiResponse":
        fields = {"success": False, "message": message}
        if error is not None:
            fields["error"] = error
        return cls(**fields)

    def to_content(self) -> dict:
        """Render only the fields that were set, for handler responses."""
        return self.model_dump(mode="json", exclude_unset=True)
