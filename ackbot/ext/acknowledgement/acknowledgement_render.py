from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from discord import ButtonStyle, Embed, ui
from discord.utils import format_dt

from ackbot.ext.acknowledgement.acknowledgement_views import (
    AcknowledgementButtons,
    AcknowledgementLayout,
)
from ackbot.lib import Color

__all__ = (
    "REASON_PREFIX",
    "REASON_MODAL_PREFIX",
    "AcknowledgementButton",
    "RenderedAcknowledgement",
    "format_header",
)

REASON_PREFIX: str = "reason_"
REASON_MODAL_PREFIX: str = "reason_modal_"


def format_header(executor_id: int | str, now: datetime) -> str:
    return f"**Time:** {format_dt(now, 'T')}\n**Executed by:** <@{executor_id}>"


@dataclass(frozen=True, slots=True)
class AcknowledgementButton:
    label: str
    style: ButtonStyle
    custom_id: Optional[str] = None
    emoji: Optional[str] = None
    url: Optional[str] = None

    def to_item(self) -> ui.Button:
        # Link buttons can't have a custom ID
        if self.url:
            return ui.Button(
                style=ButtonStyle.link, label=self.label, url=self.url, emoji=self.emoji
            )
        return ui.Button(
            style=self.style,
            label=self.label,
            custom_id=self.custom_id,
            emoji=self.emoji,
        )


@dataclass
class RenderedAcknowledgement:
    header: str
    body: str
    accent_color: Color
    timestamp: datetime
    thumbnail_url: Optional[str] = None
    buttons: list[AcknowledgementButton] = field(default_factory=list)

    @property
    def description(self) -> str:
        return f"{self.header}\n{self.body}"

    def to_embed(self) -> Embed:
        embed = Embed(
            description=self.description,
            color=self.accent_color,
            timestamp=self.timestamp,
        )
        if self.thumbnail_url:
            embed.set_thumbnail(url=self.thumbnail_url)
        return embed

    def to_view(self) -> Optional[AcknowledgementButtons]:
        # Never send an empty button row
        if not self.buttons:
            return
        return AcknowledgementButtons(button.to_item() for button in self.buttons)

    def to_layout_view(self) -> AcknowledgementLayout:
        return AcknowledgementLayout(self.header, self.body, self.accent_color)
