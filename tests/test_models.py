from dash_webhook_composer import BRAND_COLOR, Embed, WebhookMessage


class TestWebhookMessage:
    def test_blank_draft(self) -> None:
        assert WebhookMessage.blank().to_payload() == {
            "content": "",
            "username": "",
            "avatar_url": "",
            "embeds": [],
        }

    def test_payload_key_order_follows_definition(self) -> None:
        message = WebhookMessage.blank()
        message.embeds.append(Embed.default())

        payload = message.to_payload()

        assert list(payload) == ["content", "username", "avatar_url", "embeds"]
        assert list(payload["embeds"][0]) == ["title", "description", "color"]

    def test_absent_fields_are_omitted(self) -> None:
        assert WebhookMessage(content="hi").to_payload() == {"content": "hi", "embeds": []}

    def test_nested_embed_fields_use_wire_names(self) -> None:
        data = {
            "embeds": [
                {
                    "title": "T",
                    "footer": {"text": "foot", "icon_url": "https://example.com/f.png"},
                    "author": {"name": "me", "icon_url": "https://example.com/a.png"},
                    "thumbnail": {"url": "https://example.com/t.png"},
                    "fields": [{"name": "ID", "value": "7", "inline": True}],
                    "timestamp": "2024-01-01T00:00:00Z",
                }
            ]
        }

        message = WebhookMessage.from_payload(data)

        assert message.embeds[0].footer.icon_url == "https://example.com/f.png"
        assert message.embeds[0].fields[0].inline is True
        assert message.to_payload() == data

    def test_unknown_keys_survive(self) -> None:
        data = {"content": "x", "tts": True, "embeds": [{"title": "T", "image": {"url": "u"}}]}

        assert WebhookMessage.from_payload(data).to_payload() == {
            "content": "x",
            "embeds": [{"title": "T", "image": {"url": "u"}}],
            "tts": True,
        }


def test_default_embed_uses_brand_color() -> None:
    embed = Embed.default()

    assert embed.color == BRAND_COLOR == 0x5865F2
    assert embed.title == ""
    assert embed.description == ""
