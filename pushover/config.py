"""Configuration for Pushover SDK."""

import os
from dataclasses import dataclass, field
from typing import Any


@dataclass
class PushoverConfig:
    """
    Configuration for Pushover SDK client.

    Attributes:
        token: Application API token
        user: User or group key messages are delivered to
        base_url: Base URL for the Pushover API (default: "https://api.pushover.net")
        timeout: Request timeout in seconds (default: 10.0)
        verify_ssl: Whether to verify SSL certificates (default: True)
        http_options: Extra keyword arguments for the HTTP client. A "proxy"
            entry reroutes message requests through that proxy URL.
        debug: Log outgoing fields (credentials redacted) and response status
        update_sounds: Refresh the sound table in the background
        sound_update_interval: Seconds between sound table refreshes (default: one day)

    Example:
        ```python
        config = PushoverConfig(
            token="your-app-token",
            user="your-user-key",
            http_options={"proxy": "http://proxy.local:3128"},
            update_sounds=True,
        )
        ```
    """

    token: str
    user: str
    base_url: str = "https://api.pushover.net"
    timeout: float = 10.0
    verify_ssl: bool = True
    http_options: dict[str, Any] = field(default_factory=dict)
    debug: bool = False
    update_sounds: bool = False
    sound_update_interval: float = 86400.0

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.token:
            raise ValueError("token is required")

        if not self.user:
            raise ValueError("user is required")

        # Remove trailing slash from base_url
        self.base_url = self.base_url.rstrip("/")

        if self.timeout <= 0:
            raise ValueError("timeout must be greater than 0")

        if self.sound_update_interval <= 0:
            raise ValueError("sound_update_interval must be greater than 0")

        self.http_options = dict(self.http_options or {})

    @property
    def proxy(self) -> str | None:
        """Proxy URL from http_options, if one is set."""
        return self.http_options.get("proxy") or None

    @classmethod
    def from_env(cls, **overrides: Any) -> "PushoverConfig":
        """
        Build a config from PUSHOVER_* environment variables.

        Reads PUSHOVER_TOKEN, PUSHOVER_USER, PUSHOVER_PROXY and PUSHOVER_DEBUG.
        Keyword arguments take precedence over the environment.
        """
        values: dict[str, Any] = {
            "token": os.getenv("PUSHOVER_TOKEN", ""),
            "user": os.getenv("PUSHOVER_USER", ""),
            "debug": os.getenv("PUSHOVER_DEBUG", "").lower() in ("1", "true", "yes"),
        }
        proxy = os.getenv("PUSHOVER_PROXY")
        if proxy:
            values["http_options"] = {"proxy": proxy}
        values.update(overrides)
        return cls(**values)
