from discord import Interaction
from discord.ext.commands import Bot, Cog

from ackbot.ext.acknowledgement.acknowledgement_options import AcknowledgementOptions
from ackbot.ext.acknowledgement.acknowledgement_service import AcknowledgementService


class AcknowledgementCog(Cog, name="ackbot.ext.acknowledgement"):
    def __init__(self, bot: Bot, **options):
        self.bot: Bot = bot
        self.options = AcknowledgementOptions.from_data(options)
        self.service = AcknowledgementService(self.options)

    @Cog.listener()
    async def on_interaction(self, interaction: Interaction):
        await self.service.handle_interaction(interaction)
