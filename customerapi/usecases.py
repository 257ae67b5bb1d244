"""Application use cases for customers."""

from __future__ import annotations

from customerapi.domain import CustomerRepository
from customerapi.dto import CreateCustomerInput, CustomerDTO, from_entity
from customerapi.pagination import Pagination, Params, copy_metadata


class CreateCustomerUseCase:
    """Create and store a customer."""

    def __init__(self, repo: CustomerRepository):
        self.repo = repo

    def execute(self, data: CreateCustomerInput) -> CustomerDTO:
        """Store a new customer built from ``data`` and return it."""
        customer = data.to_entity()
        self.repo.save(customer)
        return from_entity(customer)


class ListCustomersUseCase:
    """List stored customers page by page."""

    def __init__(self, repo: CustomerRepository):
        self.repo = repo

    def execute(self, params: Params) -> Pagination[CustomerDTO]:
        """Return the requested page of customers."""
        result = self.repo.list(params)
        return copy_metadata(result, (from_entity(c) for c in result.data))