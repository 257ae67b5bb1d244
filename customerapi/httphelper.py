"""Request binding, validation and error responses."""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Mapping
from http import HTTPStatus
from typing import Any, TypeVar

T = TypeVar("T")

_NAMED_TYPES: dict[str, type] = {
    "str": str,
    "int": int,
    "bool": bool,
    "float": float,
}


class ErrorResponse(Exception):
    """An error that carries an HTTP status and a JSON body."""

    def __init__(self, code: int, message: str, details: Mapping[str, str] | None = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, str] = dict(details or {})

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body; details are left out when empty."""
        body: dict[str, Any] = {"message": self.message}
        if self.details:
            body["details"] = dict(self.details)
        return body


def _bad_request(message: str, details: Mapping[str, str] | None = None) -> ErrorResponse:
    return ErrorResponse(HTTPStatus.BAD_REQUEST.value, message, details)


def _decode(body: Any) -> dict[str, Any]:
    if body is None or body == b"" or body == "":
        return {}
    if isinstance(body, Mapping):
        return dict(body)
    if isinstance(body, (bytes, bytearray)):
        try:
            body = bytes(body).decode("utf-8")
        except UnicodeDecodeError:
            raise _bad_request("invalid request body") from None
    if isinstance(body, str):
        try:
            payload = json.loads(body)
        except json.JSONDecodeError:
            raise _bad_request("invalid request body") from None
        if isinstance(payload, dict):
            return payload
    raise _bad_request("invalid request body")


def _field_type(field: dataclasses.Field) -> Any:
    """Return the field's type, resolving simple string annotations."""
    tp = field.type
    if isinstance(tp, str):
        return _NAMED_TYPES.get(tp.strip(), tp)
    return tp


def _zero(tp: Any) -> Any:
    if tp is str:
        return ""
    if tp is bool:
        return False
    if tp is int:
        return 0
    if tp is float:
        return 0.0
    return None


def _matches(value: Any, tp: Any) -> bool:
    if tp is str:
        return isinstance(value, str)
    if tp is bool:
        return isinstance(value, bool)
    if tp is int:
        return isinstance(value, int) and not isinstance(value, bool)
    if tp is float:
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    return True


def bind_and_validate(body: Any, model: type[T]) -> T:
    """Bind a JSON body to the dataclass ``model`` and validate it.

    Raises ErrorResponse with status 400 when the body cannot be bound
    or a required field is missing or empty.
    """
    if not (isinstance(model, type) and dataclasses.is_dataclass(model)):
        raise _bad_request("validation error")

    payload = _decode(body)
    fields = [f for f in dataclasses.fields(model) if f.init]
    types = {f.name: _field_type(f) for f in fields}

    values: dict[str, Any] = {}
    for f in fields:
        tp = types[f.name]
        raw = payload.get(f.metadata.get("json", f.name))
        if raw is None:
            values[f.name] = _zero(tp)
        elif _matches(raw, tp):
            values[f.name] = raw
        else:
            raise _bad_request("invalid request body")

    errors = {
        f.name: f.metadata["validate"]
        for f in fields
        if f.metadata.get("validate") == "required"
        and (values[f.name] is None or values[f.name] == _zero(types[f.name]))
    }
    if errors:
        raise _bad_request("validation failed", errors)

    return model(**values)