"""Defaults, fixed messages, and theme colors for dash-webhook-composer."""

# Accent color for new embeds and the color picker fallback
BRAND_COLOR = 0x5865F2

# Shown in the preview when no username override is set
DEFAULT_USERNAME = "Webhook"

FAILURE_MESSAGE = "Failed to send webhook"
NO_URL_MESSAGE = "No webhook URL provided"

# 24-bit RGB
MAX_COLOR = 0xFFFFFF

# ---------------------------------------------------------------------------
# Discord dark theme (preview)
# ---------------------------------------------------------------------------

DC_BG = "#36393f"
DC_EMBED_BG = "#2f3136"
DC_TEXT = "#dcddde"
DC_MUTED = "#949ba4"
DC_INPUT_BG = "#40444b"

# ---------------------------------------------------------------------------
# Component ids
# ---------------------------------------------------------------------------

ID_PREFIX = "wc"


def component_id(name):
    """Namespace a page component id: ``component_id("send")`` -> ``"wc-send"``."""
    return f"{ID_PREFIX}-{name}"


def embed_field_id(field, index):
    """Pattern-matching id for one per-embed editor control."""
    return {"type": component_id(f"embed-{field}"), "index": index}
