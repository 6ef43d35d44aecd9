"""dash-webhook-composer -- compose, preview, and send webhook messages from Dash."""

__version__ = "0.1.0"

from .models import (
    Embed,
    EmbedAuthor,
    EmbedField,
    EmbedFooter,
    EmbedThumbnail,
    WebhookMessage,
)
from .serialize import serialize_message, color_to_hex, hex_to_color
from .webhook import send_webhook_payload
from .preview import EmbedPreview, MessagePreview, build_preview, render_preview
from .form import FormState, SendResult, WebhookForm
from ._constants import BRAND_COLOR, DEFAULT_USERNAME, FAILURE_MESSAGE

__all__ = [
    "__version__",
    # Payload model
    "Embed",
    "EmbedAuthor",
    "EmbedField",
    "EmbedFooter",
    "EmbedThumbnail",
    "WebhookMessage",
    # Serialization
    "serialize_message",
    "color_to_hex",
    "hex_to_color",
    # Transport
    "send_webhook_payload",
    # Preview
    "EmbedPreview",
    "MessagePreview",
    "build_preview",
    "render_preview",
    # Controller
    "FormState",
    "SendResult",
    "WebhookForm",
    # Constants
    "BRAND_COLOR",
    "DEFAULT_USERNAME",
    "FAILURE_MESSAGE",
]
