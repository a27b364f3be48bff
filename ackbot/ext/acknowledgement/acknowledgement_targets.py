from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, Optional

from discord import Interaction, InteractionType, Message

from ackbot.lib import AllowedMentions, MemberOrUser

__all__ = (
    "AcknowledgementTarget",
    "CommandTarget",
    "ComponentTarget",
    "MessageTarget",
    "resolve_target",
)


class AcknowledgementTarget(ABC):
    """
    Somewhere an acknowledgement can be delivered to.

    Resolve one with `resolve_target()` and deliver through `deliver()` without
    caring which kind of source it came from.
    """

    supports_layout: ClassVar[bool] = False
    supports_follow_up: ClassVar[bool] = False

    @property
    @abstractmethod
    def executor(self) -> MemberOrUser: ...

    @abstractmethod
    async def deliver(
        self, *, ephemeral: bool = False, follow_up: bool = False, **payload: Any
    ) -> Optional[Message]:
        """
        Send `payload` (`embed`, `view`, ...) and return the message that was sent.
        """


@dataclass
class _InteractionTarget(AcknowledgementTarget):
    interaction: Interaction

    @property
    def executor(self) -> MemberOrUser:
        return self.interaction.user

    async def deliver(
        self, *, ephemeral: bool = False, follow_up: bool = False, **payload: Any
    ) -> Optional[Message]:
        payload.setdefault("allowed_mentions", AllowedMentions.none())

        if follow_up and self.supports_follow_up:
            return await self.interaction.followup.send(
                ephemeral=ephemeral, wait=True, **payload
            )

        # Deferred or already answered, so replace the original response
        if self.interaction.response.is_done():
            return await self.interaction.edit_original_response(**payload)

        await self.interaction.response.send_message(ephemeral=ephemeral, **payload)
        return await self.interaction.original_response()


class CommandTarget(_InteractionTarget):
    """A slash command or context menu invocation."""

    supports_layout = True
    supports_follow_up = True


class ComponentTarget(_InteractionTarget):
    """A button click, select menu or modal submission."""


@dataclass
class MessageTarget(AcknowledgementTarget):
    """A plain message; acknowledgements go to its channel."""

    message: Message

    @property
    def executor(self) -> MemberOrUser:
        return self.message.author

    async def deliver(
        self, *, ephemeral: bool = False, follow_up: bool = False, **payload: Any
    ) -> Optional[Message]:
        # Channel messages can't be ephemeral and have nothing to follow up on
        payload.setdefault("allowed_mentions", AllowedMentions.none())
        return await self.message.channel.send(**payload)


def resolve_target(source: Interaction | Message) -> Optional[AcknowledgementTarget]:
    if isinstance(source, Interaction):
        match source.type:
            case InteractionType.application_command:
                return CommandTarget(source)
            case InteractionType.component | InteractionType.modal_submit:
                return ComponentTarget(source)
            case _:
                return
    if isinstance(source, Message) and source.author and source.channel:
        return MessageTarget(source)
