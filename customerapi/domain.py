"""Customer entity and the repository contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from customerapi.pagination import Pagination, Params


@dataclass
class Customer:
    """A customer of the business."""

    id: int
    first_name: str
    last_name: str
    phone: str


def new_customer(first_name: str, last_name: str, phone: str) -> Customer:
    """Create a customer that has not been stored yet."""
    return Customer(id=0, first_name=first_name, last_name=last_name, phone=phone)


class CustomerRepository(ABC):
    """Storage for customers."""

    @abstractmethod
    def save(self, customer: Customer) -> None:
        """Store the customer, assigning its id when new."""

    @abstractmethod
    def list(self, params: Params) -> Pagination[Customer]:
        """Return one page of stored customers."""