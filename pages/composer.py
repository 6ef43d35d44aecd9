"""Webhook Composer page -- build a message, preview it, send it.

Two-panel layout: form controls on the left, live Discord-styled preview and
raw JSON payload on the right.  All session state is one ``dcc.Store``
holding ``FormState.to_store()``; every callback goes through ``WebhookForm``.
"""

import os

import dash
from dash import dcc, html, callback, ctx, Input, Output, State, ALL, Patch, no_update
import dash_mantine_components as dmc

from dash_webhook_composer import FormState, WebhookForm, render_preview
from dash_webhook_composer._constants import (
    DC_INPUT_BG,
    component_id as cid,
    embed_field_id,
)
from dash_webhook_composer.serialize import color_to_hex, hex_to_color

dash.register_page(__name__, path="/", title="Webhook Composer", name="Composer")

_timeout = os.getenv("WEBHOOK_TIMEOUT", "")
WEBHOOK_TIMEOUT = float(_timeout) if _timeout else None


def _form(data):
    return WebhookForm(FormState.from_store(data), timeout=WEBHOOK_TIMEOUT)


# ---------------------------------------------------------------------------
# Embed editors
# ---------------------------------------------------------------------------


def render_embed_editor(index, embed):
    """One editable card for the embed at *index*."""
    return dmc.Paper(
        [
            dmc.Group(
                [
                    dmc.Text(f"Embed {index + 1}", fw=600, size="sm"),
                    dmc.Button(
                        "Remove",
                        id=embed_field_id("remove", index),
                        size="xs", variant="subtle", color="red",
                    ),
                ],
                justify="space-between",
                mb="xs",
            ),
            dmc.TextInput(
                id=embed_field_id("title", index),
                placeholder="Embed Title",
                value=embed.title or "",
                debounce=300,
                mb="xs",
            ),
            dmc.Textarea(
                id=embed_field_id("description", index),
                placeholder="Embed Description",
                value=embed.description or "",
                minRows=3,
                autosize=True,
                debounce=300,
                mb="xs",
            ),
            dmc.ColorInput(
                id=embed_field_id("color", index),
                label="Accent color",
                value=f"#{color_to_hex(embed.color)}",
                format="hex",
                size="xs",
            ),
        ],
        withBorder=True, p="sm", radius="sm",
        style={"backgroundColor": DC_INPUT_BG},
    )


def render_embed_editors(embeds):
    return [render_embed_editor(i, embed) for i, embed in enumerate(embeds)]


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------

layout = dmc.Container(
    [
        dmc.Space(h="md"),
        dmc.Title("Webhook Composer", order=2, mb="xs"),
        dmc.Text(
            "Compose a webhook message, check the preview and payload, then send it.",
            c="dimmed", mb="md", size="sm",
        ),
        dcc.Store(id=cid("state"), data=FormState().to_store()),
        dmc.Grid(
            [
                # ============== LEFT: Form ==============
                dmc.GridCol(
                    dmc.Stack(
                        [
                            dmc.Paper(
                                [
                                    dmc.Text("Webhook Configuration", fw=600, size="sm", mb="xs"),
                                    dmc.TextInput(
                                        id=cid("webhook-url"),
                                        label="Webhook URL",
                                        placeholder="https://discord.com/api/webhooks/...",
                                        value="",
                                        debounce=300,
                                        mb="xs",
                                    ),
                                    dmc.Textarea(
                                        id=cid("content"),
                                        label="Message Content",
                                        placeholder="Enter your message content...",
                                        value="",
                                        minRows=3,
                                        autosize=True,
                                        debounce=300,
                                        mb="xs",
                                    ),
                                    dmc.Grid(
                                        [
                                            dmc.GridCol(dmc.TextInput(
                                                id=cid("username"),
                                                label="Username Override",
                                                placeholder="Custom username",
                                                value="",
                                                debounce=300,
                                            ), span=6),
                                            dmc.GridCol(dmc.TextInput(
                                                id=cid("avatar-url"),
                                                label="Avatar URL",
                                                placeholder="https://example.com/avatar.png",
                                                value="",
                                                debounce=300,
                                            ), span=6),
                                        ],
                                    ),
                                ],
                                withBorder=True, p="sm", radius="sm",
                            ),
                            dmc.Paper(
                                [
                                    dmc.Group(
                                        [
                                            dmc.Text("Embeds", fw=600, size="sm"),
                                            dmc.Button(
                                                "+ Add Embed", id=cid("add-embed"),
                                                size="xs", color="green",
                                            ),
                                        ],
                                        justify="space-between",
                                        mb="xs",
                                    ),
                                    dmc.Stack(id=cid("embed-list"), children=[], gap="sm"),
                                ],
                                withBorder=True, p="sm", radius="sm",
                            ),
                            html.Div(id=cid("error")),
                            dmc.Group(
                                [
                                    dmc.Button(
                                        "Send Webhook", id=cid("send"),
                                        disabled=True, fullWidth=True,
                                    ),
                                    html.Div(id=cid("send-result")),
                                ],
                                gap="xs",
                            ),
                        ],
                        gap="sm",
                    ),
                    span=6,
                ),
                # ============== RIGHT: Preview ==============
                dmc.GridCol(
                    dmc.Stack(
                        [
                            dmc.Paper(
                                [
                                    dmc.Text("Preview", fw=600, size="sm", mb="xs"),
                                    html.Div(id=cid("preview")),
                                ],
                                withBorder=True, p="sm", radius="sm",
                            ),
                            dmc.Paper(
                                [
                                    dmc.Text("Raw JSON", fw=600, size="sm", mb="xs"),
                                    dmc.Code(
                                        id=cid("raw-json"),
                                        block=True,
                                        style={"maxHeight": 400, "overflow": "auto"},
                                    ),
                                ],
                                withBorder=True, p="sm", radius="sm",
                            ),
                        ],
                        gap="sm",
                    ),
                    span=6,
                ),
            ],
            gutter="md",
        ),
        dmc.Space(h="xl"),
    ],
    size="xl",
    py="md",
)


# ---------------------------------------------------------------------------
# CB1: Top-level fields
# ---------------------------------------------------------------------------

@callback(
    Output(cid("state"), "data", allow_duplicate=True),
    Input(cid("webhook-url"), "value"),
    Input(cid("content"), "value"),
    Input(cid("username"), "value"),
    Input(cid("avatar-url"), "value"),
    State(cid("state"), "data"),
    prevent_initial_call=True,
)
def update_fields(webhook_url, content, username, avatar_url, data):
    form = _form(data)
    form.set_webhook_url(webhook_url)
    form.set_content(content)
    form.set_username(username)
    form.set_avatar_url(avatar_url)
    return form.state.to_store()


# ---------------------------------------------------------------------------
# CB2: Add / remove embed
# ---------------------------------------------------------------------------

@callback(
    Output(cid("state"), "data", allow_duplicate=True),
    Output(cid("embed-list"), "children"),
    Input(cid("add-embed"), "n_clicks"),
    Input(embed_field_id("remove", ALL), "n_clicks"),
    State(cid("state"), "data"),
    prevent_initial_call=True,
)
def change_embed_list(_add, _removes, data):
    trigger = ctx.triggered_id
    # Re-rendered remove buttons fire with n_clicks=None
    if not trigger or not ctx.triggered[0]["value"]:
        return no_update, no_update

    form = _form(data)
    if trigger == cid("add-embed"):
        form.add_embed()
    else:
        form.remove_embed(trigger["index"])
    return form.state.to_store(), render_embed_editors(form.draft.embeds)


# ---------------------------------------------------------------------------
# CB3: Embed field edits
# ---------------------------------------------------------------------------

@callback(
    Output(cid("state"), "data", allow_duplicate=True),
    Input(embed_field_id("title", ALL), "value"),
    Input(embed_field_id("description", ALL), "value"),
    Input(embed_field_id("color", ALL), "value"),
    State(cid("state"), "data"),
    prevent_initial_call=True,
)
def update_embeds(titles, descriptions, colors, data):
    form = _form(data)
    embeds = form.draft.embeds
    for index in range(min(len(embeds), len(titles))):
        current = embeds[index]
        updated = current.model_copy(update={
            "title": titles[index] or "",
            "description": descriptions[index] or "",
            "color": hex_to_color(colors[index], default=current.color or 0),
        })
        if updated != current:
            form.update_embed(index, updated)
    return form.state.to_store()


# ---------------------------------------------------------------------------
# CB4: Projections
# ---------------------------------------------------------------------------

@callback(
    Output(cid("preview"), "children"),
    Output(cid("raw-json"), "children"),
    Output(cid("send"), "disabled"),
    Output(cid("error"), "children"),
    Input(cid("state"), "data"),
)
def render_projections(data):
    form = _form(data)
    error = form.state.last_error
    banner = (
        dmc.Alert(error, title="Send failed", color="red", variant="light")
        if error else None
    )
    return render_preview(form.preview()), form.raw_json(), not form.can_submit, banner


# ---------------------------------------------------------------------------
# CB5: Send
# ---------------------------------------------------------------------------

# Hide the previous error while a send is in flight
SEND_RUNNING = [(Output(cid("error"), "children"), None, no_update)]


@callback(
    Output(cid("state"), "data", allow_duplicate=True),
    Output(cid("send-result"), "children"),
    Input(cid("send"), "n_clicks"),
    State(cid("state"), "data"),
    prevent_initial_call=True,
    running=SEND_RUNNING,
)
def send_message(_n, data):
    form = _form(data)
    result = form.submit()
    if result.skipped:
        return no_update, no_update

    # Patch only last_error so edits made while the request was in flight survive
    patch = Patch()
    patch["last_error"] = form.state.last_error
    if result.success:
        return patch, dmc.Badge("Webhook sent successfully!", color="green")
    return patch, None
