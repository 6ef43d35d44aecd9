"""Form controller: the single owner of a composer session's state.

In the Dash page the state lives in a ``dcc.Store``; each callback rebuilds a
``WebhookForm`` from the store snapshot, applies one operation, and writes
``to_store()`` back.  Nothing here is module-level or shared.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from .models import Embed, WebhookMessage
from .preview import MessagePreview, build_preview
from .serialize import serialize_message
from .webhook import send_webhook_payload


@dataclass
class FormState:
    """Target URL, message draft, and the error of the last failed send."""
    webhook_url: str = ""
    draft: WebhookMessage = field(default_factory=WebhookMessage.blank)
    last_error: str | None = None

    def to_store(self) -> dict[str, Any]:
        return {
            "webhook_url": self.webhook_url,
            "draft": self.draft.to_payload(),
            "last_error": self.last_error,
        }

    @classmethod
    def from_store(cls, data: dict[str, Any] | None) -> FormState:
        if not data:
            return cls()
        draft = data.get("draft")
        return cls(
            webhook_url=data.get("webhook_url") or "",
            draft=WebhookMessage.from_payload(draft) if draft is not None else WebhookMessage.blank(),
            last_error=data.get("last_error") or None,
        )


@dataclass
class SendResult:
    """Outcome of one ``submit()``; ``skipped`` means no request was made."""
    success: bool
    error: str | None = None
    status_code: int = 0
    skipped: bool = False


class WebhookForm:
    """Mutation operations plus ``submit`` over one owned ``FormState``.

    Every mutation returns the state and fires ``on_change(state)`` if given.
    """

    def __init__(
        self,
        state: FormState | None = None,
        *,
        on_change: Callable[[FormState], None] | None = None,
        timeout: float | None = None,
    ):
        self._state = state or FormState()
        self._on_change = on_change
        self.timeout = timeout

    @property
    def state(self) -> FormState:
        return self._state

    @property
    def draft(self) -> WebhookMessage:
        return self._state.draft

    @property
    def can_submit(self) -> bool:
        return bool(self._state.webhook_url)

    def _changed(self) -> FormState:
        if self._on_change is not None:
            self._on_change(self._state)
        return self._state

    # -- top-level fields --------------------------------------------------

    def set_webhook_url(self, url: str | None) -> FormState:
        self._state.webhook_url = url or ""
        return self._changed()

    def set_content(self, text: str | None) -> FormState:
        self._state.draft.content = text or ""
        return self._changed()

    def set_username(self, text: str | None) -> FormState:
        self._state.draft.username = text or ""
        return self._changed()

    def set_avatar_url(self, text: str | None) -> FormState:
        self._state.draft.avatar_url = text or ""
        return self._changed()

    # -- embeds ------------------------------------------------------------

    def _in_bounds(self, index: int) -> bool:
        return 0 <= index < len(self._state.draft.embeds)

    def add_embed(self) -> FormState:
        self._state.draft.embeds = [*self._state.draft.embeds, Embed.default()]
        return self._changed()

    def remove_embed(self, index: int) -> FormState:
        """Drop the embed at *index*; out-of-range indexes are ignored."""
        if not self._in_bounds(index):
            return self._state
        embeds = self._state.draft.embeds
        self._state.draft.embeds = embeds[:index] + embeds[index + 1:]
        return self._changed()

    def update_embed(self, index: int, embed: Embed | dict[str, Any]) -> FormState:
        """Replace the embed at *index* wholesale; out-of-range is ignored."""
        if not self._in_bounds(index):
            return self._state
        if not isinstance(embed, Embed):
            embed = Embed.from_payload(embed)
        embeds = list(self._state.draft.embeds)
        embeds[index] = embed
        self._state.draft.embeds = embeds
        return self._changed()

    # -- projections -------------------------------------------------------

    def preview(self) -> MessagePreview:
        return build_preview(self._state.draft)

    def raw_json(self) -> str:
        return serialize_message(self._state.draft, indent=2)

    # -- send --------------------------------------------------------------

    def submit(self) -> SendResult:
        """POST the current draft to the webhook URL.

        Failures never raise; they land in ``state.last_error``.  The draft
        is serialized up front and is never modified here.
        """
        if not self.can_submit:
            return SendResult(success=False, skipped=True)

        self._state.last_error = None
        self._changed()

        body = serialize_message(self._state.draft)
        result = send_webhook_payload(
            body,
            webhook_url=self._state.webhook_url,
            timeout=self.timeout,
        )

        if not result["success"]:
            self._state.last_error = result["error"]
            self._changed()
        return SendResult(
            success=result["success"],
            error=result["error"],
            status_code=result["status_code"],
        )
