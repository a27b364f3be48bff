from typing import Iterable

from discord import SeparatorSpacing, TextStyle, ui

from ackbot.lib import Color
from ackbot.lib.constants import MAX_TEXT_INPUT_LENGTH

__all__ = (
    "REASON_INPUT_ID",
    "AcknowledgementLayout",
    "AcknowledgementButtons",
    "ReasonModal",
)

REASON_INPUT_ID: str = "reason_input"


class AcknowledgementLayout(ui.LayoutView):
    """
    A Components V2 acknowledgement: the header and body in one container,
    split by a divider.
    """

    def __init__(self, header: str, body: str, accent_color: Color):
        super().__init__(timeout=None)

        container = ui.Container(
            ui.TextDisplay(header),
            ui.Separator(visible=True, spacing=SeparatorSpacing.large),
            ui.TextDisplay(body),
            accent_color=accent_color,
        )

        self.add_item(container)


class AcknowledgementButtons(ui.View):
    # Clicks are routed through the bot's `on_interaction` event by custom ID,
    # so this view only carries the buttons and has no callbacks of its own.
    def __init__(self, buttons: Iterable[ui.Button]):
        super().__init__()
        for button in buttons:
            self.add_item(button)


class ReasonModal(ui.Modal):
    def __init__(self, custom_id: str, existing_reason: str = ""):
        super().__init__(title="Reason Details", custom_id=custom_id, timeout=None)

        self.reason_input = ui.TextInput(
            label="Enter or modify the reason",
            custom_id=REASON_INPUT_ID,
            style=TextStyle.paragraph,
            placeholder="Provide reason here...",
            default=existing_reason[:MAX_TEXT_INPUT_LENGTH],
            max_length=MAX_TEXT_INPUT_LENGTH,
            required=True,
        )
        self.add_item(self.reason_input)
