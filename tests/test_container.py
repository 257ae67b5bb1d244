import pytest

from customerapi.container import build_container
from customerapi.dto import CreateCustomerInput
from customerapi.pagination import Params
from customerapi.repository import close, connect


@pytest.fixture
def container():
    engine = connect("sqlite://")
    yield build_container(engine)
    close(engine)


def test_handlers_share_one_repository(container):
    create_repo = container.create_customer_handler.use_case.repo
    list_repo = container.list_customers_handler.use_case.repo
    assert create_repo is list_repo


def test_created_customer_is_listed(container):
    created = container.create_customer_handler.use_case.execute(
        CreateCustomerInput(first_name="John", last_name="Doe", phone="[phone]")
    )
    page = container.list_customers_handler.use_case.execute(Params())
    assert page.data == [created]
    assert page.total == 1
    assert created.first_name == "John"