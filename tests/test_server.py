from http import HTTPStatus
from unittest import mock

import pytest
from flask import Flask

from customerapi.container import Container, build_container
from customerapi.domain import CustomerRepository
from customerapi.handlers import CreateCustomerHandler, ListCustomersHandler
from customerapi.repository import close, connect
from customerapi.server import DBConfig, create_app, main
from customerapi.usecases import CreateCustomerUseCase, ListCustomersUseCase

CREATE_CUSTOMER = {"first_name": "John", "last_name": "Doe", "phone": "[phone]"}


class BrokenRepository(CustomerRepository):
    def save(self, customer):
        raise RuntimeError("database unavailable")

    def list(self, params):
        raise RuntimeError("database unavailable")


@pytest.fixture
def client():
    engine = connect("sqlite://")
    app = create_app(build_container(engine))
    yield app.test_client()
    close(engine)


@pytest.fixture
def broken_client():
    repo = BrokenRepository()
    container = Container(
        create_customer_handler=CreateCustomerHandler(CreateCustomerUseCase(repo)),
        list_customers_handler=ListCustomersHandler(ListCustomersUseCase(repo)),
    )
    return create_app(container).test_client()


def test_e2e_create_then_list(client):
    created = client.post("/api/customers", json=CREATE_CUSTOMER)
    assert created.status_code == HTTPStatus.CREATED
    customer = created.get_json()
    assert customer["first_name"] == "John"
    assert customer["id"] > 0

    listed = client.get("/api/customers")
    assert listed.status_code == HTTPStatus.OK
    body = listed.get_json()
    assert len(body["data"]) == 1
    assert body["data"][0] == customer


def test_validation_error_response(client):
    response = client.post("/api/customers", json={"first_name": "John"})
    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert response.get_json() == {
        "message": "validation failed",
        "details": {"last_name": "required", "phone": "required"},
    }


def test_internal_error_response(broken_client):
    response = broken_client.get("/api/customers")
    assert response.status_code == HTTPStatus.INTERNAL_SERVER_ERROR
    assert response.get_json() == {"message": "internal server error"}


def test_unknown_route(client):
    response = client.get("/api/unknown")
    assert response.status_code == HTTPStatus.NOT_FOUND
    assert response.get_json() == {"message": "Not Found"}


def test_db_config_url():
    password = "password"
    config = DBConfig(
        host="localhost", port="5432", db_name="customers", user="user", password=password
    )
    url = config.url()
    assert url.drivername == "postgresql"
    assert url.database == "customers"
    assert url.password == password
    assert url.port == 5432
    assert url.query["sslmode"] == "disable"


def test_main_serves_app():
    with mock.patch.object(Flask, "run") as run:
        code = main(["--database-url", "sqlite://", "--host", "127.0.0.1", "--port", "8081"])
    assert code == 0
    run.assert_called_once_with(host="127.0.0.1", port=8081)