from datetime import datetime
from logging import Logger, getLogger
from typing import Any, Optional

from discord import (
    ButtonStyle,
    ComponentType,
    Embed,
    Guild,
    Interaction,
    InteractionType,
    Message,
)
from discord.utils import utcnow

from ackbot.ext.acknowledgement.acknowledgement_exceptions import (
    MissingReasonEmbed,
    ReasonTooLong,
)
from ackbot.ext.acknowledgement.acknowledgement_options import AcknowledgementOptions
from ackbot.ext.acknowledgement.acknowledgement_reason import (
    extract_reason,
    format_reason_line,
    replace_reason,
)
from ackbot.ext.acknowledgement.acknowledgement_render import (
    REASON_MODAL_PREFIX,
    REASON_PREFIX,
    AcknowledgementButton,
    RenderedAcknowledgement,
    format_header,
)
from ackbot.ext.acknowledgement.acknowledgement_targets import (
    AcknowledgementTarget,
    resolve_target,
)
from ackbot.ext.acknowledgement.acknowledgement_views import (
    REASON_INPUT_ID,
    ReasonModal,
)
from ackbot.lib import AllowedMentions, MemberOrUser
from ackbot.lib.constants import MAX_EMBED_DESCRIPTION_LENGTH
from ackbot.lib.utils import timestamp_ms

__all__ = ("AcknowledgementService",)

DEFAULT_REASON: str = "No reason provided"


class AcknowledgementService:
    """
    Renders and sends moderation acknowledgements, and keeps their reason line
    editable through a button and modal.

    Every public coroutine is best-effort: platform errors are logged and turned
    into a `None` or `False` result instead of being raised to the caller.
    """

    def __init__(self, options: AcknowledgementOptions):
        self.options: AcknowledgementOptions = options
        self._log: Logger = getLogger(__name__)

    # @@ RENDERING

    def _reason_button(self, custom_id: str, label: str) -> AcknowledgementButton:
        return AcknowledgementButton(
            label=label,
            style=ButtonStyle.secondary,
            custom_id=custom_id,
            emoji=self.options.reason_emoji,
        )

    def render(
        self,
        executor_id: int | str,
        body: str,
        *,
        has_reason_button: bool = False,
        correlation_id: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> RenderedAcknowledgement:
        now = now or utcnow()

        buttons: list[AcknowledgementButton] = []
        if has_reason_button:
            correlation_id = correlation_id or str(timestamp_ms(now))
            buttons.append(
                self._reason_button(f"{REASON_PREFIX}{correlation_id}", "Reason Details")
            )

        return RenderedAcknowledgement(
            header=format_header(executor_id, now),
            body=body,
            accent_color=self.options.accent_color,
            timestamp=now,
            thumbnail_url=self.options.image_url,
            buttons=buttons,
        )

    def build_reason_modal(
        self, correlation_id: str, existing_reason: str = ""
    ) -> ReasonModal:
        return ReasonModal(f"{REASON_MODAL_PREFIX}{correlation_id}", existing_reason)

    # @@ DISPATCH

    def _embed_payload(self, rendered: RenderedAcknowledgement) -> dict[str, Any]:
        payload: dict[str, Any] = {"embed": rendered.to_embed()}
        if view := rendered.to_view():
            payload["view"] = view
        return payload

    async def send(
        self,
        source: Interaction | Message,
        body: str,
        *,
        ephemeral: bool = False,
        has_reason_button: bool = False,
        correlation_id: Optional[str] = None,
        follow_up: bool = False,
        prefer_layout: Optional[bool] = None,
    ) -> Optional[Message]:
        """
        Send an acknowledgement for `body` to wherever `source` came from.

        Command interactions get a Components V2 layout first when possible. If
        that fails, the same acknowledgement is delivered once as an embed.
        Returns the sent message, or `None` if nothing could be sent.
        """

        target: Optional[AcknowledgementTarget] = resolve_target(source)
        if not target:
            self._log.debug(f"Nowhere to send an acknowledgement for: {source!r}")
            return

        if prefer_layout is None:
            prefer_layout = self.options.prefer_layout

        rendered = self.render(
            target.executor.id,
            body,
            has_reason_button=has_reason_button,
            correlation_id=correlation_id,
        )

        # Reasons are edited in the embed description, so only button-less
        # acknowledgements use the layout
        if prefer_layout and target.supports_layout and not rendered.buttons:
            try:
                return await target.deliver(
                    ephemeral=ephemeral,
                    follow_up=follow_up,
                    view=rendered.to_layout_view(),
                )
            except Exception as ex:
                self._log.warning(
                    f"Layout acknowledgement failed, falling back to embed: {ex}"
                )

        try:
            return await target.deliver(
                ephemeral=ephemeral,
                follow_up=follow_up,
                **self._embed_payload(rendered),
            )
        except Exception:
            self._log.exception("Failed to send acknowledgement")

    async def send_unban_acknowledgement(
        self,
        guild: Guild,
        user: MemberOrUser,
        executor: MemberOrUser,
        reason: str = DEFAULT_REASON,
    ) -> Optional[Message]:
        try:
            channel_id = self.options.unban_channel_id
            channel = guild.get_channel(channel_id) if channel_id else None
            if not channel:
                self._log.error(
                    f"Unban acknowledgement channel not found: {channel_id}"
                )
                return None

            now = utcnow()
            rendered = self.render(
                executor.id,
                f"User {user.mention} ({user}) has been unbanned\n{format_reason_line(reason)}",
                now=now,
            )
            rendered.buttons.extend(
                (
                    self._reason_button(
                        f"{REASON_PREFIX}unban_{user.id}_{timestamp_ms(now)}",
                        "Edit Reason",
                    ),
                    AcknowledgementButton(
                        label="View Profile",
                        style=ButtonStyle.link,
                        url=f"https://discord.com/users/{user.id}",
                        emoji=self.options.profile_emoji,
                    ),
                )
            )

            return await channel.send(  # type: ignore
                allowed_mentions=AllowedMentions.none(),
                **self._embed_payload(rendered),
            )
        except Exception:
            self._log.exception("Failed to send unban acknowledgement")
            return None

    # @@ REASONS

    async def update_reason(self, interaction: Interaction, reason: str) -> bool:
        """
        Rewrite the reason line of the acknowledgement `interaction` came from.
        """

        try:
            message: Optional[Message] = interaction.message
            if not message or not message.embeds:
                raise MissingReasonEmbed

            embed: Embed = message.embeds[0].copy()
            description: str = replace_reason(embed.description or "", reason)
            if len(description) > MAX_EMBED_DESCRIPTION_LENGTH:
                raise ReasonTooLong

            embed.description = description

            # Leaving out `view` keeps the message's components as they are
            await message.edit(embeds=[embed, *message.embeds[1:]])
            return True
        except Exception:
            self._log.exception("Failed to update acknowledgement reason")
            return False

    # @@ INTERACTIONS

    def _submitted_value(self, components: list[dict], custom_id: str) -> Optional[str]:
        # Modal components arrive as action rows or labels wrapping the inputs
        for component in components:
            if component.get("custom_id") == custom_id:
                return component.get("value")
            children: list[dict] = list(component.get("components", []))
            if child := component.get("component"):
                children.append(child)
            if (value := self._submitted_value(children, custom_id)) is not None:
                return value

    async def _show_reason_modal(self, interaction: Interaction, custom_id: str):
        existing_reason: str = DEFAULT_REASON
        if interaction.message and interaction.message.embeds:
            description = interaction.message.embeds[0].description
            existing_reason = extract_reason(description) or DEFAULT_REASON

        modal = self.build_reason_modal(
            custom_id.removeprefix(REASON_PREFIX), existing_reason
        )
        await interaction.response.send_modal(modal)

    async def _submit_reason(self, interaction: Interaction):
        components: list[dict] = (interaction.data or {}).get("components", [])  # type: ignore
        reason: Optional[str] = self._submitted_value(components, REASON_INPUT_ID)

        success: bool = reason is not None and await self.update_reason(
            interaction, reason
        )

        await interaction.response.send_message(
            "✅ Reason updated!" if success else "❌ Failed to update reason.",
            ephemeral=True,
        )

    async def handle_interaction(self, interaction: Interaction):
        """
        Route reason button clicks and reason modal submissions. Everything else
        is ignored.
        """

        data: dict = interaction.data or {}  # type: ignore
        custom_id: str = data.get("custom_id") or ""

        is_button: bool = (
            interaction.type == InteractionType.component
            and data.get("component_type") == ComponentType.button.value
        )
        is_modal_submit: bool = interaction.type == InteractionType.modal_submit

        if not (is_button or is_modal_submit):
            return

        try:
            # The modal prefix also starts with the button prefix, so check it first
            if is_modal_submit and custom_id.startswith(REASON_MODAL_PREFIX):
                self._log.debug(f"Reason submitted for: {custom_id}")
                await self._submit_reason(interaction)
            elif (
                is_button
                and custom_id.startswith(REASON_PREFIX)
                and not custom_id.startswith(REASON_MODAL_PREFIX)
            ):
                self._log.debug(f"Reason requested for: {custom_id}")
                await self._show_reason_modal(interaction, custom_id)
        except Exception:
            self._log.exception(f"Failed to handle reason interaction: {custom_id}")
