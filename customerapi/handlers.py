"""HTTP handlers for the customer endpoints."""

from __future__ import annotations

import re
from http import HTTPStatus
from typing import Any

from flask import Blueprint, request

from customerapi.dto import CreateCustomerInput
from customerapi.httphelper import ErrorResponse, bind_and_validate
from customerapi.pagination import Params
from customerapi.usecases import CreateCustomerUseCase, ListCustomersUseCase

_FORM_TYPES = {"application/x-www-form-urlencoded", "multipart/form-data"}
_INTEGER = re.compile(r"[+-]?[0-9]+")


def _request_body() -> Any:
    raw = request.get_data()
    if not raw:
        return None
    if request.is_json:
        return raw
    if request.mimetype in _FORM_TYPES:
        return request.form.to_dict()
    raise ErrorResponse(HTTPStatus.BAD_REQUEST.value, "invalid request body")


def _atoi(value: str | None) -> int:
    if value is None or not _INTEGER.fullmatch(value):
        return 0
    return int(value)


class CreateCustomerHandler:
    """Handles POST /customers."""

    def __init__(self, use_case: CreateCustomerUseCase | None):
        self.use_case = use_case

    def handle(self) -> tuple[dict[str, Any], int]:
        """Create a customer from the request body."""
        data = bind_and_validate(_request_body(), CreateCustomerInput)
        result = self.use_case.execute(data)
        return result.to_dict(), HTTPStatus.CREATED.value


class ListCustomersHandler:
    """Handles GET /customers."""

    def __init__(self, use_case: ListCustomersUseCase | None):
        self.use_case = use_case

    def handle(self) -> tuple[dict[str, Any], int]:
        """Return the page of customers named by the query string."""
        params = Params(
            page=_atoi(request.args.get("page")),
            limit=_atoi(request.args.get("limit")),
        )
        result = self.use_case.execute(params)
        return result.to_dict(), HTTPStatus.OK.value


def register(
    blueprint: Blueprint,
    create: CreateCustomerHandler,
    list_handler: ListCustomersHandler,
) -> None:
    """Attach the customer routes to ``blueprint``."""
    blueprint.add_url_rule(
        "/customers", endpoint="create_customer", view_func=create.handle, methods=["POST"]
    )
    blueprint.add_url_rule(
        "/customers", endpoint="list_customers", view_func=list_handler.handle, methods=["GET"]
    )