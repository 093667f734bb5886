"""Pushover SDK Client.

Async client for the Pushover message API. Messages are sent as
multipart/form-data so an image attachment can travel with them.
"""

import asyncio
import inspect
import uuid
from typing import Any, Callable, Mapping

import httpx
import pydantic
import structlog

from .config import PushoverConfig
from .exceptions import (
    APIError,
    PushoverError,
    ResponseParseError,
    ServiceUnavailableError,
    ValidationError,
)
from .handlers import ErrorHandler, resolve_error_handler
from .models import Message, SendResult, SoundsResponse, fill_defaults, load_attachment
from .multipart import content_type, encode_multipart
from .sounds import SoundTable

logger = structlog.get_logger()

MESSAGES_PATH = "/1/messages.json"
SOUNDS_PATH = "/1/sounds.json"
REDACTED = "XXXXX"

SendCallback = Callable[[Exception | None, str | None, httpx.Response | None], Any]


def _field_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


class PushoverClient:
    """
    Async client for the Pushover message API.

    Each instance owns its multipart boundary, its sound table and, when
    ``update_sounds`` is enabled, the background task refreshing that table.

    Example:
        ```python
        from pushover import PushoverClient

        async with PushoverClient(token="app-token", user="user-key") as client:
            result = await client.send({"message": "Backup finished", "title": "nas"})

            # With an image attachment
            await client.send({"message": "Motion detected", "file": "/tmp/frame.jpg"})
        ```
    """

    def __init__(
        self,
        config: PushoverConfig | None = None,
        on_error: ErrorHandler | Callable[..., Any] | None = None,
        **config_kwargs: Any,
    ) -> None:
        """
        Initialize Pushover client.

        Args:
            config: Client configuration. If None, one is built from config_kwargs.
            on_error: Handler for API and parse errors. If None, they are raised.
            **config_kwargs: PushoverConfig fields (token, user, debug, ...)
        """
        if config is None:
            config = PushoverConfig(**config_kwargs)
        elif config_kwargs:
            raise TypeError("Pass either a config or config keyword arguments, not both")

        self.config = config
        self.boundary = uuid.uuid4().hex
        self.error_handler = resolve_error_handler(on_error)
        self._sound_table = SoundTable()
        self._client: httpx.AsyncClient | None = None
        self._sound_task: asyncio.Task | None = None
        logger.info("PushoverClient initialized", base_url=self.config.base_url)

        if self.config.update_sounds:
            try:
                asyncio.get_running_loop()
            except RuntimeError:
                # No loop yet: started by __aenter__, start_sound_updates() or send()
                pass
            else:
                self.start_sound_updates()

    async def __aenter__(self) -> "PushoverClient":
        """Async context manager entry."""
        self._get_client()
        if self.config.update_sounds:
            self.start_sound_updates()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()

    @property
    def sounds(self) -> Mapping[str, str]:
        """Current sound id -> label table."""
        return self._sound_table.snapshot

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            options = {k: v for k, v in self.config.http_options.items() if k != "proxy"}
            self._client = httpx.AsyncClient(
                **{
                    "timeout": self.config.timeout,
                    "verify": self.config.verify_ssl,
                    **options,
                }
            )
        return self._client

    def _resolve_target(self, path: str) -> tuple[str, dict[str, str]]:
        """
        Get the request URL and any routing headers.

        With a proxy configured the request goes to the proxy's scheme, host
        and port, and the API host travels in the Host header.
        """
        url = httpx.URL(f"{self.config.base_url}{path}")
        proxy = self.config.proxy
        if not proxy:
            return str(url), {}

        proxy_url = httpx.URL(proxy)
        target = url.copy_with(
            scheme=proxy_url.scheme,
            host=proxy_url.host,
            port=proxy_url.port,
        )
        return str(target), {"Host": url.host}

    def _coerce_message(self, message: Message | Mapping[str, Any]) -> Message:
        if isinstance(message, Message):
            return message
        try:
            return Message.model_validate(message)
        except pydantic.ValidationError as e:
            raise ValidationError(f"Invalid message: {e}") from e

    def _build_fields(self, message: Message) -> dict[str, str]:
        """Credentials first, then every non-empty message field except the attachment."""
        record = fill_defaults(message.model_dump(exclude={"file"}, exclude_none=True))
        fields = {
            "token": record.pop("token", None) or self.config.token,
            "user": record.pop("user", None) or self.config.user,
        }
        for name, value in record.items():
            text = _field_value(value)
            if text != "":
                fields[name] = text
        return fields

    @staticmethod
    def _redact(fields: Mapping[str, str]) -> dict[str, str]:
        redacted = dict(fields)
        for name in ("token", "user"):
            if name in redacted:
                redacted[name] = REDACTED
        return redacted

    def _check_response(self, response: httpx.Response) -> tuple[Any, PushoverError | None]:
        """
        Parse a response body and look for an errors list.

        Returns:
            The decoded body (None if it is not JSON) and the error found, if any
        """
        try:
            data = response.json()
        except ValueError:
            return None, ResponseParseError(
                f"Pushover: response is not valid JSON (HTTP {response.status_code})",
                status_code=response.status_code,
            )

        errors = data.get("errors") if isinstance(data, dict) else None
        if errors:
            if isinstance(errors, dict):
                messages = [f"{key}: {value}" for key, value in errors.items()]
            elif isinstance(errors, list):
                messages = [str(e) for e in errors]
            else:
                messages = [str(errors)]
            return data, APIError(
                messages[0],
                errors=messages,
                status_code=response.status_code,
            )
        return data, None

    def _report(self, error: PushoverError, response: httpx.Response | None) -> None:
        self.error_handler.report(error, response)

    @staticmethod
    async def _complete(callback: SendCallback | None, result: SendResult) -> None:
        if callback is None:
            return
        outcome = callback(result.error, result.body, result.response)
        if inspect.isawaitable(outcome):
            await outcome

    async def send(
        self,
        message: Message | Mapping[str, Any],
        callback: SendCallback | None = None,
    ) -> SendResult:
        """
        Send a message.

        The callback, if given, is called exactly once with
        ``(error, body, response)``. On transport failure body and response
        are None. API and parse errors are also passed to the error handler
        after the callback has run.

        Args:
            message: Message model or mapping with at least a "message" key
            callback: Optional completion handler, plain or async

        Returns:
            SendResult with the same values the callback received

        Raises:
            ValidationError: If the message is invalid
            OSError: If an attachment path cannot be read
            APIError: If the response reports errors and no on_error handler is set
            ResponseParseError: If the response is not JSON and no on_error handler is set
        """
        msg = self._coerce_message(message)
        fields = self._build_fields(msg)
        attachment = load_attachment(msg.file) if msg.file else None
        body = encode_multipart(fields, self.boundary, attachment)

        url, headers = self._resolve_target(MESSAGES_PATH)
        headers["Content-Type"] = content_type(self.boundary)
        headers["Content-Length"] = str(len(body))

        if self.config.update_sounds and self._sound_task is None:
            self.start_sound_updates()

        if msg.sound and msg.sound not in self._sound_table:
            logger.warning("Unknown sound", sound=msg.sound)

        if self.config.debug:
            logger.info(
                "Pushover request",
                url=url,
                fields=self._redact(fields),
                attachment=attachment.name if attachment else None,
            )

        try:
            response = await self._get_client().post(url, content=body, headers=headers)
        except httpx.RequestError as e:
            logger.error("Send message request failed", error=str(e))
            error = ServiceUnavailableError(f"Pushover service unavailable: {e}")
            error.__cause__ = e
            result = SendResult(error=error, body=None, response=None)
            await self._complete(callback, result)
            return result

        if self.config.debug:
            logger.info("Pushover response", status_code=response.status_code)

        _, error = self._check_response(response)
        if error is not None:
            logger.warning(
                "Pushover message rejected",
                error=error.message,
                status_code=response.status_code,
            )

        result = SendResult(error=error, body=response.text, response=response)
        await self._complete(callback, result)
        if error is not None:
            self._report(error, response)
        return result

    # =========================================================================
    # Sound table
    # =========================================================================

    async def update_sounds(self) -> Mapping[str, str] | None:
        """
        Fetch the sound list and replace the sound table.

        Returns:
            The new table, or None if the refresh failed. Failures go to the
            error handler and leave the previous table in place.
        """
        try:
            response = await self._get_client().get(
                f"{self.config.base_url}{SOUNDS_PATH}",
                params={"token": self.config.token},
            )
        except httpx.RequestError as e:
            logger.error("Sound update request failed", error=str(e))
            error = ServiceUnavailableError(f"Pushover service unavailable: {e}")
            error.__cause__ = e
            self._report(error, None)
            return None

        data, error = self._check_response(response)
        if error is None:
            try:
                sounds = SoundsResponse.model_validate(data).sounds
            except pydantic.ValidationError:
                error = ResponseParseError(
                    "Pushover: parsing sound data failed",
                    status_code=response.status_code,
                )

        if error is not None:
            logger.warning("Sound update failed", error=error.message)
            self._report(error, response)
            return None

        table = self._sound_table.replace(sounds)
        logger.info("Sound table updated", count=len(table))
        return table

    def start_sound_updates(self) -> None:
        """Start the background sound refresh. Must be called with a running event loop."""
        if self._sound_task is None:
            self._sound_task = asyncio.create_task(self._sound_update_loop())

    async def _sound_update_loop(self) -> None:
        """Refresh the sound table now and then once per interval."""
        while True:
            try:
                try:
                    await self.update_sounds()
                except PushoverError as e:
                    logger.error("Sound update error", error=str(e))
                except Exception:
                    logger.exception("Sound update error")
                await asyncio.sleep(self.config.sound_update_interval)
            except asyncio.CancelledError:
                break

    async def close(self) -> None:
        """Stop the sound refresh and close the HTTP client."""
        if self._sound_task:
            self._sound_task.cancel()
            await asyncio.gather(self._sound_task, return_exceptions=True)
            self._sound_task = None
        if self._client:
            await self._client.aclose()
            self._client = None
            logger.info("PushoverClient closed")
