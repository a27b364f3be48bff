import json
from dataclasses import dataclass, field
from logging import Logger, getLogger
from pathlib import Path
from typing import Any, Optional, Self

from ackbot.core.configured_extension import ConfiguredExtension
from ackbot.core.exceptions import ExtensionIsRequired, ExtensionNotInConfig
from ackbot.lib import AllowedMentions, FromDataMixin, Intents, JsonSerializable
from ackbot.lib.types import JsonObject
from ackbot.lib.utils import dict_without_falsies


@dataclass
class Config(JsonSerializable, FromDataMixin):
    command_prefix: str
    intents: Intents
    allowed_mentions: AllowedMentions

    extensions: dict[str, ConfiguredExtension]
    enabled_extensions: list[ConfiguredExtension] = field(
        init=False, default_factory=list
    )
    disabled_extensions: list[ConfiguredExtension] = field(
        init=False, default_factory=list
    )

    # @implements FromDataMixin
    @classmethod
    def try_from_data(cls, data: Any) -> Optional[Self]:
        if isinstance(data, dict):
            log: Logger = getLogger(__name__)
            log.info(f"Number of configuration keys: {len(data)}")

            # Get command prefix
            command_prefix: str = data["command_prefix"]
            log.info(f"Command prefix: {command_prefix}")

            # Process intents
            intents = Intents.default()
            if i := Intents.from_field_optional(data, "intents"):
                intents = Intents.default() & i
            if i := Intents.from_field_optional(data, "privileged_intents"):
                intents |= Intents.privileged() & i

            log.info(f"Using intents flags: {intents.value}")

            # Process allowed mentions
            allowed_mentions = AllowedMentions.not_everyone()
            if m := AllowedMentions.from_field_optional(data, "allowed_mentions"):
                allowed_mentions = m

            log.info(f"Using allowed mentions: {allowed_mentions.to_json()}")

            # Process extensions
            log.info("Processing extensions...")

            raw_extensions = data.get("extensions", [])
            extensions: dict[str, ConfiguredExtension] = {}
            for raw_entry in raw_extensions:
                ext = ConfiguredExtension.from_data(raw_entry)
                extensions[ext.name] = ext

            if extensions:
                log.info(f"Processed {len(extensions)} extensions...")
            else:
                log.warning("No extensions configured.")

            return cls(
                command_prefix=command_prefix,
                intents=intents,
                allowed_mentions=allowed_mentions,
                extensions=extensions,
            )

    # @implements JsonSerializable
    def to_json(self) -> Any:
        return dict_without_falsies(
            command_prefix=self.command_prefix,
            intents=self.intents.value,
            allowed_mentions=(
                None
                if self.allowed_mentions == AllowedMentions.not_everyone()
                else self.allowed_mentions.to_json()
            ),
            extensions=[ext.to_json() for ext in self.extensions.values()],
        )

    @classmethod
    def from_file(cls, path: Path) -> Self:
        raw_config: JsonObject = {}
        with open(path) as file:
            raw_config = json.load(file)

        return cls.from_data(raw_config)

    def __post_init__(self):
        self._rebuild_extension_states()

    def _rebuild_extension_states(self):
        self.enabled_extensions.clear()
        self.disabled_extensions.clear()

        for ext in self.extensions.values():
            if ext.disabled:
                self.disabled_extensions.append(ext)
            else:
                self.enabled_extensions.append(ext)

    def get_extension(self, name: str) -> ConfiguredExtension:
        """
        Get an extension from the config.

        Raises
        ------
        ExtensionNotInConfig
            The extension was not in the config.
        """

        if ext := self.extensions.get(name):
            return ext
        raise ExtensionNotInConfig(name)

    def get_optional_extension(self, name: str) -> ConfiguredExtension:
        """
        Get an extension from the config that's not marked as required.

        Raises
        ------
        ExtensionNotInConfig
            The extension was not in the config.
        ExtensionIsRequired
            The extension was a required extension.
        """

        ext: ConfiguredExtension = self.get_extension(name)
        if not ext.required:
            return ext
        raise ExtensionIsRequired(name)

    def get_extension_options(self, name: str) -> Optional[JsonObject]:
        ext: ConfiguredExtension = self.get_extension(name)
        return ext.options

    def enable_extension(self, name: str):
        ext: ConfiguredExtension = self.get_extension(name)
        if ext in self.disabled_extensions:
            ext.disabled = False
            self._rebuild_extension_states()

    def disable_extension(self, name: str):
        ext: ConfiguredExtension = self.get_optional_extension(name)
        if ext in self.enabled_extensions:
            ext.disabled = True
            self._rebuild_extension_states()
