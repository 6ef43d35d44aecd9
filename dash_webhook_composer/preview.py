"""Discord-dark preview of a webhook message.

``build_preview`` is the pure projection (easy to test); ``render_preview``
turns it into DMC components for the composer page.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from dash import html
import dash_mantine_components as dmc

from ._constants import DC_BG, DC_EMBED_BG, DC_TEXT, DC_MUTED, DEFAULT_USERNAME
from .models import WebhookMessage
from .serialize import color_to_hex


@dataclass
class EmbedPreview:
    title: str | None
    description: str | None
    accent: str


@dataclass
class MessagePreview:
    username: str
    avatar_url: str | None = None
    content: str | None = None
    embeds: list[EmbedPreview] = field(default_factory=list)


def build_preview(message: WebhookMessage) -> MessagePreview:
    """Project *message* into what the preview shows."""
    return MessagePreview(
        username=message.username or DEFAULT_USERNAME,
        avatar_url=message.avatar_url or None,
        content=message.content or None,
        embeds=[
            EmbedPreview(
                title=embed.title or None,
                description=embed.description or None,
                accent=f"#{color_to_hex(embed.color)}",
            )
            for embed in message.embeds
        ],
    )


def _render_embed(embed: EmbedPreview):
    children = []
    if embed.title:
        children.append(dmc.Text(embed.title, fw=700, c=DC_TEXT, mb="xs"))
    if embed.description:
        children.append(
            dmc.Text(
                embed.description,
                size="sm", c=DC_TEXT,
                style={"whiteSpace": "pre-wrap"},
            )
        )
    return html.Div(
        children,
        className="wc-embed-preview",
        style={
            "background": DC_EMBED_BG,
            "borderLeft": f"4px solid {embed.accent}",
            "borderRadius": "4px",
            "padding": "12px 16px",
        },
    )


def render_preview(preview: MessagePreview):
    """Render a ``MessagePreview`` as Discord-dark DMC components.

    Returns
    -------
    dash.html.Div
    """
    header = []
    if preview.avatar_url:
        header.append(
            dmc.Avatar(src=preview.avatar_url, alt="Avatar", radius="xl", size="md")
        )
    header.append(dmc.Text(preview.username, fw=700, c=DC_TEXT))

    children = [dmc.Group(header, gap="sm", mb="sm")]
    if preview.content:
        children.append(
            dmc.Text(
                preview.content,
                size="sm", c=DC_TEXT, mb="sm",
                style={"whiteSpace": "pre-wrap"},
            )
        )
    if preview.embeds:
        children.append(
            dmc.Stack([_render_embed(embed) for embed in preview.embeds], gap="sm")
        )
    elif not preview.content:
        children.append(
            dmc.Text("Nothing to preview yet", size="sm", c=DC_MUTED)
        )

    return html.Div(
        children,
        style={
            "backgroundColor": DC_BG,
            "borderRadius": 8,
            "padding": 16,
        },
    )
