import pytest
from discord import ButtonStyle, ui

from ackbot.ext.acknowledgement.acknowledgement_views import (
    AcknowledgementButtons,
    AcknowledgementLayout,
    ReasonModal,
)
from tests.conftest import FIXED_NOW

TIMESTAMP = int(FIXED_NOW.timestamp())


def test_description_starts_with_time_then_executor(service):
    rendered = service.render("42", "User <@99> banned", now=FIXED_NOW)

    lines = rendered.description.split("\n")
    assert lines[0] == f"**Time:** <t:{TIMESTAMP}:T>"
    assert lines[1] == "**Executed by:** <@42>"
    assert lines[2:] == ["User <@99> banned"]


def test_multiline_body_follows_header(service):
    rendered = service.render(42, "line one\nline two", now=FIXED_NOW)

    assert rendered.description.split("\n")[2:] == ["line one", "line two"]


def test_reason_button_with_generated_correlation_id(service):
    rendered = service.render(
        "42", "User <@99> banned", has_reason_button=True, now=FIXED_NOW
    )

    assert len(rendered.buttons) == 1
    button = rendered.buttons[0]
    assert button.custom_id == f"reason_{int(FIXED_NOW.timestamp() * 1000)}"
    assert button.label == "Reason Details"
    assert button.style is ButtonStyle.secondary
    assert button.emoji == "📝"


def test_reason_button_with_supplied_correlation_id(service):
    rendered = service.render("42", "body", has_reason_button=True, correlation_id="abc")

    assert rendered.buttons[0].custom_id == "reason_abc"


def test_no_buttons_means_no_view(service):
    rendered = service.render("42", "body", now=FIXED_NOW)

    assert rendered.buttons == []
    assert rendered.to_view() is None


def test_embed_rendering(service, options):
    rendered = service.render("42", "body", now=FIXED_NOW)

    embed = rendered.to_embed()

    assert embed.description == rendered.description
    assert embed.color == options.accent_color
    assert embed.thumbnail.url == options.image_url
    assert embed.timestamp == FIXED_NOW


def test_embed_without_thumbnail(service, options):
    options.image_url = None

    embed = service.render("42", "body", now=FIXED_NOW).to_embed()

    assert embed.thumbnail.url is None


@pytest.mark.asyncio
async def test_button_view_contains_rendered_buttons(service):
    rendered = service.render("42", "body", has_reason_button=True, correlation_id="1")

    view = rendered.to_view()

    assert isinstance(view, AcknowledgementButtons)
    assert len(view.children) == 1
    button = view.children[0]
    assert isinstance(button, ui.Button)
    assert button.custom_id == "reason_1"


@pytest.mark.asyncio
async def test_layout_view_stacks_header_divider_body(service):
    rendered = service.render("42", "User <@99> banned", now=FIXED_NOW)

    layout = rendered.to_layout_view()

    assert isinstance(layout, AcknowledgementLayout)
    (container,) = layout.children
    assert isinstance(container, ui.Container)
    header, separator, body = container.children
    assert isinstance(header, ui.TextDisplay)
    assert header.content == rendered.header
    assert isinstance(separator, ui.Separator)
    assert separator.visible
    assert isinstance(body, ui.TextDisplay)
    assert body.content == "User <@99> banned"


@pytest.mark.asyncio
async def test_reason_modal(service):
    modal = service.build_reason_modal("123", "spam")

    assert isinstance(modal, ReasonModal)
    assert modal.custom_id == "reason_modal_123"
    assert modal.title == "Reason Details"
    assert modal.reason_input.custom_id == "reason_input"
    assert modal.reason_input.default == "spam"
    assert modal.reason_input.max_length == 1000
    assert modal.reason_input.required
