import logging
from http import HTTPStatus

import pytest
from flask import abort

from customerapi.errorhandler import handle_error
from customerapi.httphelper import ErrorResponse


def _raised_by_abort(*args, **kwargs):
    with pytest.raises(Exception) as info:
        abort(*args, **kwargs)
    return info.value


def test_error_response_keeps_code_and_details():
    error = ErrorResponse(HTTPStatus.BAD_REQUEST.value, "validation failed", {"phone": "required"})
    body, code = handle_error(error)
    assert code == HTTPStatus.BAD_REQUEST
    assert body == {"message": "validation failed", "details": {"phone": "required"}}


def test_error_response_without_details():
    body, code = handle_error(ErrorResponse(HTTPStatus.BAD_REQUEST.value, "invalid request body"))
    assert body == {"message": "invalid request body"}
    assert code == HTTPStatus.BAD_REQUEST


def test_unknown_error_is_internal(caplog):
    with caplog.at_level(logging.ERROR):
        body, code = handle_error(RuntimeError("boom"))
    assert code == HTTPStatus.INTERNAL_SERVER_ERROR
    assert body == {"message": "internal server error"}
    assert "boom" in caplog.text


def test_http_error_with_description():
    body, code = handle_error(_raised_by_abort(HTTPStatus.CONFLICT.value, description="conflict"))
    assert code == HTTPStatus.CONFLICT
    assert body == {"message": "conflict"}


def test_http_error_default_message():
    body, code = handle_error(_raised_by_abort(HTTPStatus.NOT_FOUND.value))
    assert code == HTTPStatus.NOT_FOUND
    assert body == {"message": "Not Found"}


def test_http_error_is_not_logged(caplog):
    with caplog.at_level(logging.ERROR):
        handle_error(_raised_by_abort(HTTPStatus.NOT_FOUND.value))
    assert caplog.records == []