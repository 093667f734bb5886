"""Data models for Pushover SDK."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import httpx
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

# Optional message fields that are always present after fill_defaults
OPTIONAL_FIELDS = (
    "device",
    "title",
    "url",
    "url_title",
    "priority",
    "timestamp",
    "sound",
)


class Attachment(BaseModel):
    """Binary image attached to a message."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    content: bytes = Field(validation_alias=AliasChoices("content", "data"))
    type: str | None = None

    @classmethod
    def from_path(cls, path: str | os.PathLike) -> "Attachment":
        """Read a file into an attachment named after its final path segment."""
        file_path = Path(path)
        return cls(name=file_path.name, content=file_path.read_bytes())


class Message(BaseModel):
    """
    A Pushover message.

    Only ``message`` is required. Unknown fields are kept and sent as-is.
    """

    model_config = ConfigDict(extra="allow")

    message: str
    token: str | None = None
    user: str | None = None
    file: str | Path | Attachment | None = None
    device: str | None = None
    title: str | None = None
    url: str | None = None
    url_title: str | None = None
    priority: int | str | None = None
    timestamp: int | str | None = None
    sound: str | None = None
    html: int | str | None = None
    ttl: int | str | None = None


class SoundsResponse(BaseModel):
    """Response from the sounds endpoint."""

    model_config = ConfigDict(extra="allow")

    status: int | None = None
    request: str | None = None
    sounds: dict[str, str]


@dataclass
class SendResult:
    """Outcome of a single send call.

    On transport failure ``body`` and ``response`` are None.
    """

    error: Exception | None
    body: str | None
    response: httpx.Response | None

    @property
    def ok(self) -> bool:
        return self.error is None


def fill_defaults(record: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of ``record`` with every optional field present, falsy ones as ""."""
    filled = dict(record)
    for name in OPTIONAL_FIELDS:
        if not filled.get(name):
            filled[name] = ""
    return filled


def load_attachment(source: str | os.PathLike | Attachment | Mapping[str, Any]) -> Attachment:
    """
    Resolve an attachment source.

    Args:
        source: A file path, a ready Attachment, or a mapping with
            name/content (or data)/type keys

    Returns:
        Attachment

    Raises:
        OSError: If a path cannot be read
    """
    if isinstance(source, Attachment):
        return source
    if isinstance(source, (str, os.PathLike)):
        return Attachment.from_path(source)
    return Attachment.model_validate(source)
