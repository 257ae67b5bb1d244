"""Wires repositories, use cases and handlers together."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.engine import Engine

from customerapi.handlers import CreateCustomerHandler, ListCustomersHandler
from customerapi.repository import SqlCustomerRepository
from customerapi.usecases import CreateCustomerUseCase, ListCustomersUseCase


@dataclass
class Container:
    """The handlers the HTTP layer needs."""

    create_customer_handler: CreateCustomerHandler
    list_customers_handler: ListCustomersHandler


def build_container(engine: Engine) -> Container:
    """Build every dependency on top of ``engine``."""
    repo = SqlCustomerRepository(engine)
    return Container(
        create_customer_handler=CreateCustomerHandler(CreateCustomerUseCase(repo)),
        list_customers_handler=ListCustomersHandler(ListCustomersUseCase(repo)),
    )