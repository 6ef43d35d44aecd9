"""Pydantic models for webhook message payloads.

Attribute names match the snake_case wire names, so ``to_payload()`` is the
JSON object a webhook ingests.  Keys the form does not edit (``footer``,
``author``, ``fields``, unknown extras, ...) survive a parse/dump cycle.

Reference:
https://discord.com/developers/docs/resources/webhook#execute-webhook
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ._constants import BRAND_COLOR


class _WireModel(BaseModel):
    model_config = ConfigDict(extra="allow")

    def to_payload(self) -> dict[str, Any]:
        """Wire dict: ``None`` values dropped, empty strings kept, definition order."""
        return self.model_dump(exclude_none=True)

    @classmethod
    def from_payload(cls, data: dict[str, Any]):
        return cls.model_validate(data)


class EmbedFooter(_WireModel):
    text: str
    icon_url: str | None = None


class EmbedThumbnail(_WireModel):
    url: str


class EmbedAuthor(_WireModel):
    name: str
    url: str | None = None
    icon_url: str | None = None


class EmbedField(_WireModel):
    name: str
    value: str
    inline: bool | None = None


class Embed(_WireModel):
    """One rich content block with an accent color stripe."""
    title: str | None = None
    description: str | None = None
    color: int | None = Field(None, description="24-bit RGB accent, 0x000000-0xFFFFFF")
    url: str | None = None
    timestamp: str | None = None
    footer: EmbedFooter | None = None
    thumbnail: EmbedThumbnail | None = None
    author: EmbedAuthor | None = None
    fields: list[EmbedField] | None = None

    @classmethod
    def default(cls) -> Embed:
        """The embed appended by the "Add Embed" control."""
        return cls(title="", description="", color=BRAND_COLOR)


class WebhookMessage(_WireModel):
    """Top-level webhook payload; ``embeds`` order is display and send order."""
    content: str | None = None
    username: str | None = None
    avatar_url: str | None = None
    embeds: list[Embed] = Field(default_factory=list)

    @classmethod
    def blank(cls) -> WebhookMessage:
        return cls(content="", username="", avatar_url="", embeds=[])


__all__ = [
    "Embed",
    "EmbedAuthor",
    "EmbedField",
    "EmbedFooter",
    "EmbedThumbnail",
    "WebhookMessage",
]
