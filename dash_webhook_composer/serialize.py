"""The one JSON routine shared by the raw-payload view and the request body.

Both call ``serialize_message`` so that the text shown to the user parses to
exactly the object that is POSTed; only whitespace differs.
"""

from __future__ import annotations

import json

from ._constants import BRAND_COLOR, MAX_COLOR
from .models import WebhookMessage


def serialize_message(message: WebhookMessage, *, indent: int | None = None) -> str:
    """Serialize *message* to wire JSON.

    ``indent=2`` gives the pretty raw projection, ``None`` the compact body.
    The compact body escapes non-ASCII so any text, lone surrogates
    included, encodes to bytes; both forms parse to the same object.
    """
    compact = indent is None
    separators = (",", ":") if compact else (",", ": ")
    return json.dumps(
        message.to_payload(),
        indent=indent,
        separators=separators,
        ensure_ascii=compact,
    )


def color_to_hex(color: int | None) -> str:
    """Six lowercase hex digits for *color*; ``None`` and ``0`` give ``"000000"``.

    Values outside 24 bits are masked rather than rejected.
    """
    if not color:
        return "000000"
    return f"{int(color) & MAX_COLOR:06x}"


def hex_to_color(value: str | None, default: int = BRAND_COLOR) -> int:
    """Parse ``#rrggbb`` / ``rrggbb`` / ``#rgb`` picker output into an int."""
    if not value:
        return default
    digits = value.strip().lstrip("#")
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) != 6:
        return default
    try:
        return int(digits, 16)
    except ValueError:
        return default
