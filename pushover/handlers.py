"""Error reporting strategies for Pushover SDK.

Application and parse errors found in API responses are funnelled through a
single ``ErrorHandler``. Without a custom handler they are re-raised so they
never disappear silently.
"""

from typing import Any, Callable, Protocol, runtime_checkable

import httpx

from .exceptions import PushoverError


@runtime_checkable
class ErrorHandler(Protocol):
    """Receives errors reported by the client."""

    def report(self, error: PushoverError, response: httpx.Response | None) -> None:
        ...


class RaiseErrorHandler:
    """Default handler: re-raise the reported error."""

    def report(self, error: PushoverError, response: httpx.Response | None) -> None:
        raise error


class CallbackErrorHandler:
    """Adapts a plain ``(error, response)`` callable to ``ErrorHandler``."""

    def __init__(self, callback: Callable[[PushoverError, httpx.Response | None], Any]) -> None:
        self.callback = callback

    def report(self, error: PushoverError, response: httpx.Response | None) -> None:
        self.callback(error, response)


def resolve_error_handler(on_error: ErrorHandler | Callable[..., Any] | None) -> ErrorHandler:
    """Return an ErrorHandler for whatever was passed as ``on_error``."""
    if on_error is None:
        return RaiseErrorHandler()
    if callable(on_error):
        return CallbackErrorHandler(on_error)
    if isinstance(on_error, ErrorHandler):
        return on_error
    raise TypeError("on_error must be an ErrorHandler or a callable")
