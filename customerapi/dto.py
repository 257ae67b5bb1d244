"""Data transfer objects for customers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from customerapi.domain import Customer, new_customer

_REQUIRED = {"validate": "required"}


@dataclass
class CreateCustomerInput:
    """Request body for creating a customer."""

    first_name: str = field(metadata={"json": "first_name", **_REQUIRED})
    last_name: str = field(metadata={"json": "last_name", **_REQUIRED})
    phone: str = field(metadata={"json": "phone", **_REQUIRED})

    def to_entity(self) -> Customer:
        """Build a new, unsaved customer from the input."""
        return new_customer(self.first_name, self.last_name, self.phone)


@dataclass
class CustomerDTO:
    """Customer as returned by the API."""

    id: int
    first_name: str
    last_name: str
    phone: str

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready representation."""
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "phone": self.phone,
        }


def from_entity(customer: Customer) -> CustomerDTO:
    """Map a customer entity to its transfer object."""
    return CustomerDTO(
        id=customer.id,
        first_name=customer.first_name,
        last_name=customer.last_name,
        phone=customer.phone,
    )