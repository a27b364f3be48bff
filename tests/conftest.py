from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest
from discord import Embed, Interaction, InteractionType, Message

from ackbot.ext.acknowledgement.acknowledgement_options import AcknowledgementOptions
from ackbot.ext.acknowledgement.acknowledgement_service import AcknowledgementService

FIXED_NOW = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def make_message(description: Optional[str] = None) -> MagicMock:
    message = MagicMock(spec=Message)
    message.author = MagicMock(id=7)
    message.channel = MagicMock()
    message.channel.send = AsyncMock()
    message.embeds = [Embed(description=description)] if description is not None else []
    message.edit = AsyncMock()
    return message


def make_interaction(
    kind: InteractionType = InteractionType.application_command,
    *,
    user_id: int = 42,
    is_done: bool = False,
    data: Optional[dict[str, Any]] = None,
    message: Optional[MagicMock] = None,
) -> MagicMock:
    interaction = MagicMock(spec=Interaction)
    interaction.type = kind
    interaction.user = MagicMock(id=user_id)
    interaction.data = data or {}
    interaction.message = message

    interaction.response = MagicMock()
    interaction.response.is_done = MagicMock(return_value=is_done)
    interaction.response.send_message = AsyncMock()
    interaction.response.send_modal = AsyncMock()
    interaction.response.defer = AsyncMock()

    interaction.followup = MagicMock()
    interaction.followup.send = AsyncMock()

    interaction.edit_original_response = AsyncMock()
    interaction.original_response = AsyncMock()
    return interaction


@pytest.fixture()
def options() -> AcknowledgementOptions:
    return AcknowledgementOptions(
        image_url="https://example.com/ack.png", unban_channel_id=1234
    )


@pytest.fixture()
def service(options: AcknowledgementOptions) -> AcknowledgementService:
    return AcknowledgementService(options)
