"""Data transfer objects for customer operations."""

from dataclasses import dataclass

from src.domain.entities import Address, CustomerProfile


@dataclass(frozen=True)
class CustomerRequest:
    """Input data for creating or updating a customer."""

    name: str
    email: str
    phone: str
    address_line1: str
    city: str
    state: str
    postal_code: str
    country: str
    address_line2: str = ""

    def to_profile(self) -> CustomerProfile:
        return CustomerProfile(
            name=self.name,
            email=self.email,
            phone=self.phone,
            address=Address(
                line1=self.address_line1,
                line2=self.address_line2,
                city=self.city,
                state=self.state,
                postal_code=self.postal_code,
                country=self.country,
            ),
        )
