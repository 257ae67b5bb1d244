"""Turns exceptions raised by request handlers into JSON responses."""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any

from customerapi.httphelper import ErrorResponse

_log = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "internal server error"


def _http_error(error: BaseException) -> tuple[int, str] | None:
    if isinstance(error, ErrorResponse):
        return None
    code = getattr(error, "code", None)
    name = getattr(error, "name", None)
    if not isinstance(code, int) or not isinstance(name, str):
        return None
    description = getattr(error, "description", None)
    if isinstance(description, str) and description != getattr(type(error), "description", None):
        return code, description
    return code, name


def handle_error(error: BaseException) -> tuple[dict[str, Any], int]:
    """Return the JSON body and status code for ``error``.

    HTTP errors keep their status, ErrorResponse keeps its status and body,
    anything else is logged and reported as an internal server error.
    """
    http = _http_error(error)
    if http is not None:
        code, message = http
        return ErrorResponse(code, message).to_dict(), code
    if isinstance(error, ErrorResponse):
        return error.to_dict(), error.code
    _log.error("%s", error)
    status = HTTPStatus.INTERNAL_SERVER_ERROR.value
    return ErrorResponse(status, INTERNAL_ERROR_MESSAGE).to_dict(), status