"""Customer-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from src.application.dto import CustomerRequest


class CustomerCreateSchema(BaseModel):
    """Schema for POST /customer/create request body."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "name": "Jenny Rosen",
                    "email": "jenny.rosen@example.com",
                    "phone": "5555550100",
                    "addressLine1": "510 Townsend St",
                    "addressLine2": "",
                    "city": "San Francisco",
                    "state": "CA",
                    "postalCode": "94103",
                    "country": "US",
                }
            ]
        },
    )

    name: str = Field(..., min_length=1, description="Customer's full name")
    email: EmailStr = Field(..., description="Customer's email address")
    phone: str = Field(
        ...,
        pattern=r"^[0-9]{10}$",
        description="Ten digit phone number",
        examples=["5555550100"],
    )
    address_line1: str = Field(..., alias="addressLine1", min_length=1)
    address_line2: str = Field("", alias="addressLine2")
    city: str = Field(..., min_length=1)
    state: str = Field(..., min_length=1)
    postal_code: str = Field(..., alias="postalCode", min_length=1)
    country: str = Field(..., min_length=1)

    def to_request(self) -> CustomerRequest:
        return CustomerRequest(
            name=self.name,
            email=str(self.email),
            phone=self.phone,
            address_line1=self.address_line1,
            address_line2=self.address_line2,
            city=self.city,
            state=self.state,
            postal_code=self.postal_code,
            country=self.country,
        )


class CustomerUpdateSchema(CustomerCreateSchema):
    """Schema for POST /customer/update request body."""

    stripe_customer_id: str = Field(
        ...,
        alias="stripeCustomerId",
        min_length=1,
        description="Gateway customer id",
        examples=["cus_NffrFeUfNV2Hib"],
    )
