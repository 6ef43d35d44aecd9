from dash import html

from dash_webhook_composer import (
    DEFAULT_USERNAME,
    Embed,
    WebhookForm,
    WebhookMessage,
    build_preview,
    render_preview,
)


class TestBuildPreview:
    def test_blank_draft_uses_default_username(self) -> None:
        preview = build_preview(WebhookMessage.blank())

        assert preview.username == DEFAULT_USERNAME == "Webhook"
        assert preview.avatar_url is None
        assert preview.content is None
        assert preview.embeds == []

    def test_populated_fields(self) -> None:
        message = WebhookMessage(
            content="hello",
            username="bot",
            avatar_url="https://example.com/a.png",
            embeds=[
                Embed(title="T", description="", color=0x5865F2),
                Embed(title="", description="D"),
            ],
        )

        preview = build_preview(message)

        assert preview.username == "bot"
        assert preview.avatar_url == "https://example.com/a.png"
        assert preview.content == "hello"
        assert [(e.title, e.description, e.accent) for e in preview.embeds] == [
            ("T", None, "#5865f2"),
            (None, "D", "#000000"),
        ]

    def test_form_preview_tracks_state(self) -> None:
        form = WebhookForm()
        form.add_embed()
        form.add_embed()
        form.remove_embed(0)

        assert len(form.preview().embeds) == 1


class TestRenderPreview:
    def test_embed_blocks_carry_accent_border(self) -> None:
        message = WebhookMessage(embeds=[Embed(title="T", color=0x00FF00)])

        root = render_preview(build_preview(message))

        assert isinstance(root, html.Div)
        embed_divs = [
            child
            for stack in root.children
            if hasattr(stack, "children") and isinstance(stack.children, list)
            for child in stack.children
            if isinstance(child, html.Div)
        ]
        assert embed_divs[0].style["borderLeft"] == "4px solid #00ff00"

    def test_empty_message_renders_placeholder(self) -> None:
        root = render_preview(build_preview(WebhookMessage.blank()))

        assert len(root.children) == 2
