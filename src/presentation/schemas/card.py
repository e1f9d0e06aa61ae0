"""Card-related Pydantic schemas."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.application.dto import AddCardRequest


class AddCardSchema(BaseModel):
    """
    Schema for POST /card/add request body.

    ``cardNumber`` and ``cvc`` are kept as digit strings so leading zeros
    reach the gateway. JSON numbers are still accepted.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "stripeCustomerId": "cus_NffrFeUfNV2Hib",
                    "type": "card",
                    "cardNumber": "4242424242424242",
                    "expiryMonth": 8,
                    "expiryYear": 2030,
                    "cvc": "314",
                }
            ]
        },
    )

    stripe_customer_id: str = Field(..., alias="stripeCustomerId", min_length=1)
    type: Literal["card"] = Field(..., description="Payment method type")
    card_number: str = Field(..., alias="cardNumber", pattern=r"^[0-9]+$")
    expiry_month: int = Field(..., alias="expiryMonth", gt=0)
    expiry_year: int = Field(..., alias="expiryYear", gt=0)
    cvc: str = Field(..., pattern=r"^[0-9]+$")

    @field_validator("card_number", "cvc", mode="before")
    @classmethod
    def numbers_as_text(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("card_number", "cvc")
    @classmethod
    def not_all_zeros(cls, value: str) -> str:
        if not value.strip("0"):
            raise ValueError("must not be zero")
        return value

    def to_request(self) -> AddCardRequest:
        return AddCardRequest(
            customer_id=self.stripe_customer_id,
            card_number=self.card_number,
            expiry_month=self.expiry_month,
            expiry_year=self.expiry_year,
            cvc=self.cvc,
            method_type=self.type,
        )


class CardReferenceSchema(BaseModel):
    """Schema for POST /card/delete and POST /card/set-default request bodies."""

    model_config = ConfigDict(populate_by_name=True)

    stripe_customer_id: str = Field(
        ...,
        alias="stripeCustomerId",
        min_length=1,
        examples=["cus_NffrFeUfNV2Hib"],
    )
    payment_method_id: str = Field(
        ...,
        alias="paymentMethodId",
        min_length=1,
        examples=["pm_1MqLiJLkdIwHu7ixUEgbFdYF"],
    )
