from typing import Self

import discord

from ackbot.lib.from_data_mixin import FromDataMixin

__all__ = ("Color",)


class Color(discord.Color, FromDataMixin):
    """Extends `discord.Color` to simplify deserialization."""

    # @overrides discord.Color
    def __repr__(self) -> str:
        return f"0x{self.value:X}"

    # @overrides discord.Color
    @classmethod
    def from_str(cls, value: str) -> Self:
        # The classmethod, `discord.Color.from_str()`, always returns a
        # `discord.Color` regardless of what `cls` is. So we need to
        # construct our `cls` using a temporary `discord.Color`.
        temp: discord.Color = super().from_str(value)
        return cls(temp.value)

    # @overrides FromDataMixin
    @classmethod
    def try_from_data(cls, data):
        if isinstance(data, str):
            return cls.from_str(data)
        elif isinstance(data, int):
            return cls(data)
        elif isinstance(data, dict):
            return cls.from_field_optional(data, "color")

    @classmethod
    def black(cls) -> Self:
        """A factory method that returns a :class:`Color` with a value of ``0x000000``.

        .. color:: #000000
        """
        return cls(0x000000)
