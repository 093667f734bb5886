"""multipart/form-data encoding for Pushover message requests."""

from typing import Iterable, Mapping

from .models import Attachment

CRLF = "\r\n"
DEFAULT_ATTACHMENT_TYPE = "application/octet-stream"


def _header_param(value: str) -> str:
    """Percent-escape characters that would break a quoted header parameter."""
    return value.replace("\r", "%0D").replace("\n", "%0A").replace('"', "%22")


def content_type(boundary: str) -> str:
    """Content-Type header value for a body encoded with ``boundary``."""
    return f"multipart/form-data; boundary={boundary}"


def encode_multipart(
    fields: Mapping[str, str] | Iterable[tuple[str, str]],
    boundary: str,
    attachment: Attachment | None = None,
) -> bytes:
    """
    Encode form fields and an optional attachment as a multipart/form-data body.

    Fields are written in the order given; empty values are skipped. The
    attachment, if any, becomes a final part named "attachment" whose bytes
    are copied verbatim.

    Args:
        fields: Field name to string value, as a mapping or (name, value) pairs
        boundary: Boundary token (without the leading dashes)
        attachment: Optional binary attachment

    Returns:
        The complete request body
    """
    marker = f"--{boundary}"
    pairs = fields.items() if isinstance(fields, Mapping) else fields

    lines = [marker]
    for name, value in pairs:
        if value == "":
            continue
        lines.append(f'Content-Disposition: form-data; name="{_header_param(name)}"')
        lines.append("")
        lines.append(value)
        lines.append(marker)

    closing = f"{CRLF}{marker}--{CRLF}".encode("utf-8")

    if attachment is None:
        # The last marker would open an empty part; keep it only when it is the sole opener.
        if len(lines) > 1:
            lines.pop()
        return CRLF.join(lines).encode("utf-8") + closing

    lines.append(
        f'Content-Disposition: form-data; name="attachment"; filename="{_header_param(attachment.name)}"'
    )
    lines.append(f"Content-Type: {_header_param(attachment.type or DEFAULT_ATTACHMENT_TYPE)}")
    lines.append("")
    lines.append("")
    return b"".join(
        [
            CRLF.join(lines).encode("utf-8"),
            bytes(attachment.content),
            closing,
        ]
    )
