from dataclasses import dataclass, field
from typing import Any, Optional, Self

from emoji import is_emoji

from ackbot.lib import ChannelID, Color, FromDataMixin

DEFAULT_IMAGE_URL: str = "https://cdn.discordapp.com/attachments/1438520973300338871/1448547405271142481/Gemini_Generated_Image_ws15xkws15xkws15.png?ex=693ba866&is=693a56e6&hm=9af2ef7bc5c8a2fc72f1b83920a7fccaae3c70d384b5a9faa50ac9c1fc6a6c6e&"
DEFAULT_UNBAN_CHANNEL_ID: ChannelID = 1378464794499092581


@dataclass
class AcknowledgementOptions(FromDataMixin):
    """
    Options for the acknowledgement extension.

    Attributes
    ----------
    image_url
        Thumbnail shown on every embed acknowledgement. `None` disables it.
    unban_channel_id
        The channel that unban acknowledgements are posted to. `None` disables them.
    accent_color
        Color of the embed strip and the layout container.
    prefer_layout
        Try sending command acknowledgements as a Components V2 layout first.
    reason_emoji
        Emoji shown on the reason buttons.
    profile_emoji
        Emoji shown on the "View Profile" button.
    """

    image_url: Optional[str] = DEFAULT_IMAGE_URL
    unban_channel_id: Optional[ChannelID] = DEFAULT_UNBAN_CHANNEL_ID
    accent_color: Color = field(default_factory=Color.black)
    prefer_layout: bool = True
    reason_emoji: str = "📝"
    profile_emoji: str = "👤"

    # @implements FromDataMixin
    @classmethod
    def try_from_data(cls, data: Any) -> Optional[Self]:
        if isinstance(data, dict):
            reason_emoji: str = data.get("reason_emoji", "📝")
            profile_emoji: str = data.get("profile_emoji", "👤")
            for value in (reason_emoji, profile_emoji):
                if not is_emoji(value):
                    raise ValueError(f"Not an emoji: {value!r}")

            prefer_layout = data.get("prefer_layout", True)
            if not isinstance(prefer_layout, bool):
                raise ValueError(f"Not a boolean: {prefer_layout!r}")

            unban_channel_id = data.get("unban_channel_id", DEFAULT_UNBAN_CHANNEL_ID)
            accent_color = Color.from_field_optional(data, "accent_color")

            return cls(
                image_url=data.get("image_url", DEFAULT_IMAGE_URL),
                unban_channel_id=(
                    int(unban_channel_id) if unban_channel_id is not None else None
                ),
                accent_color=accent_color if accent_color is not None else Color.black(),
                prefer_layout=prefer_layout,
                reason_emoji=reason_emoji,
                profile_emoji=profile_emoji,
            )
