"""Pushover Python SDK

Provides an async client for the Pushover notification API.

Example:
    ```python
    from pushover import PushoverClient, PushoverConfig, Attachment

    config = PushoverConfig(token="app-token", user="user-key", update_sounds=True)
    async with PushoverClient(config) as client:
        await client.send({"message": "Hello!", "sound": "magic"})

        # Attach an image, either from disk or from memory
        await client.send(
            {
                "message": "Snapshot",
                "file": Attachment(name="snap.png", content=png_bytes, type="image/png"),
            }
        )
    ```
"""

from .client import PushoverClient
from .config import PushoverConfig
from .exceptions import (
    APIError,
    PushoverError,
    ResponseParseError,
    ServiceUnavailableError,
    ValidationError,
)
from .handlers import CallbackErrorHandler, ErrorHandler, RaiseErrorHandler
from .models import (
    OPTIONAL_FIELDS,
    Attachment,
    Message,
    SendResult,
    SoundsResponse,
    fill_defaults,
    load_attachment,
)
from .multipart import encode_multipart
from .sounds import DEFAULT_SOUNDS, SoundTable

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Client
    "PushoverClient",
    # Configuration
    "PushoverConfig",
    # Exceptions
    "PushoverError",
    "APIError",
    "ResponseParseError",
    "ServiceUnavailableError",
    "ValidationError",
    # Error handlers
    "ErrorHandler",
    "RaiseErrorHandler",
    "CallbackErrorHandler",
    # Models
    "Message",
    "Attachment",
    "SendResult",
    "SoundsResponse",
    "OPTIONAL_FIELDS",
    "fill_defaults",
    "load_attachment",
    # Encoding
    "encode_multipart",
    # Sounds
    "DEFAULT_SOUNDS",
    "SoundTable",
]
