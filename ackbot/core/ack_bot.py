import importlib.util
import sys
from logging import Logger, getLogger
from typing import Any, Optional, Type

from discord import Interaction
from discord.app_commands import AppCommandError, CommandInvokeError
from discord.ext.commands import Bot, Cog, ExtensionNotFound

from ackbot.core.config import Config
from ackbot.core.configured_extension import ConfiguredExtension
from ackbot.lib import EventData, ResponsiveException


class AckBot(Bot):
    def __init__(self, config: Config, sync_tree_on_login: bool = False):
        # Store the config and if the command tree should sync on login
        self.config: Config = config
        self._sync_tree_on_login: bool = sync_tree_on_login

        # Initialize discord.py Bot base.
        super().__init__(
            command_prefix=config.command_prefix,
            intents=config.intents,
            allowed_mentions=config.allowed_mentions,
        )

        # Grab our own logger instance.
        self.log: Logger = getLogger("AckBot")

        # Route app command errors through our handler
        self.tree.on_error = self.on_app_command_error

    async def add_configured_cog(self, ext_name: str, cog_class: Type[Cog]):
        cog: Optional[Cog] = None
        if options := self.config.get_extension_options(ext_name):
            cog = cog_class(self, **options)
        else:
            cog = cog_class(self)

        await self.add_cog(cog)

    def _resolve_extension_name(self, name: str, package: Optional[str]) -> str:
        try:
            return importlib.util.resolve_name(name, package)
        except ImportError:
            raise ExtensionNotFound(name)

    # @overrides Bot
    async def load_extension(self, name: str, *, package: Optional[str] = None):
        try:
            # Resolve the extension name and get the extension.
            resolved_name: str = self._resolve_extension_name(name, package)
            ext: ConfiguredExtension = self.config.get_extension(resolved_name)

            # Load extension and enable it in the config.
            self.log.info(f"[--->] {ext.name}")
            await super().load_extension(ext.name)
            self.config.enable_extension(ext.name)
        except Exception as ex:
            self.log.exception(f"Failed to load extension: {name}")
            raise ex

    # @overrides Bot
    async def unload_extension(self, name: str, *, package: Optional[str] = None):
        try:
            # Resolve the extension name and make sure it's allowed to be unloaded
            resolved_name: str = self._resolve_extension_name(name, package)
            ext: ConfiguredExtension = self.config.get_optional_extension(
                resolved_name
            )

            # Unload extension and disable it in the config
            self.log.info(f"[-x->] {ext.name}")
            await super().unload_extension(ext.name)
            self.config.disable_extension(ext.name)
        except Exception as ex:
            self.log.exception(f"Failed to unload extension: {name}")
            raise ex

    # @overrides Bot
    async def setup_hook(self):
        # Load extensions
        self.log.info(
            f"Loading {len(self.config.enabled_extensions)} enabled extensions..."
        )

        for ext in list(self.config.enabled_extensions):
            await self.load_extension(ext.name)

        self.log.info(f"Finished loading extensions.")

        # Sync global app commands if we were asked to
        if self._sync_tree_on_login:
            synced = await self.tree.sync()
            self.log.warning(f"Synced {len(synced)} global app commands.")

    # @overrides Bot
    async def on_connect(self):
        self.log.warning("Connected to Discord.")

    # @overrides Bot
    async def on_disconnect(self):
        self.log.warning("Disconnected from Discord.")

    # @overrides Bot
    async def on_error(self, event_method: str, *args: Any, **kwargs: Any):
        _, ex, _ = sys.exc_info()
        if isinstance(ex, Exception):
            event_data = EventData(event_method, args, kwargs)
            self.log.exception(f"Unhandled exception in event handler: {event_data}")
        else:
            await super().on_error(event_method, *args, **kwargs)

    # Callback for `CommandTree.on_error()`
    async def on_app_command_error(
        self, interaction: Interaction, ex: AppCommandError | Exception
    ):
        # Unwrap exceptions raised from inside the command callback
        if isinstance(ex, CommandInvokeError):
            ex = ex.original

        # Let exceptions that know how to respond do so
        if isinstance(ex, ResponsiveException):
            await ex.respond(interaction)
            return

        command_name = interaction.command.qualified_name if interaction.command else None
        self.log.exception(f"Unhandled app command error in {command_name}", exc_info=ex)

        error_message = "🔥 Something went wrong trying to do that"
        if not interaction.response.is_done():
            await interaction.response.send_message(error_message, ephemeral=True)
        else:
            await interaction.followup.send(error_message, ephemeral=True)
