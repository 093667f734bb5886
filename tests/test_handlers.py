"""Tests for error reporting strategies."""

from unittest.mock import MagicMock

import pytest

from pushover import APIError, CallbackErrorHandler, RaiseErrorHandler
from pushover.handlers import resolve_error_handler


def test_default_handler_raises():
    """Test that the default handler raises what it is given."""
    handler = resolve_error_handler(None)
    assert isinstance(handler, RaiseErrorHandler)
    with pytest.raises(APIError, match="message cannot be blank"):
        handler.report(APIError("message cannot be blank"), None)


def test_callable_is_wrapped():
    """Test that a plain function becomes a CallbackErrorHandler."""
    callback = MagicMock(spec=lambda error, response: None)
    handler = resolve_error_handler(callback)
    assert isinstance(handler, CallbackErrorHandler)

    error = APIError("user key is invalid")
    handler.report(error, None)
    callback.assert_called_once_with(error, None)


def test_invalid_handler_rejected():
    """Test that non-callables are rejected."""
    with pytest.raises(TypeError):
        resolve_error_handler("print")


def test_api_error_keeps_all_errors():
    """Test that APIError exposes the full errors list."""
    error = APIError("first", errors=["first", "second"], status_code=400)
    assert error.errors == ["first", "second"]
    assert error.status_code == 400
    assert str(error) == "first"
