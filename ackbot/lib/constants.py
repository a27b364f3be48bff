import sys
from importlib.metadata import PackageNotFoundError, version

__all__ = (
    "ACKBOT_VERSION",
    "DISCORD_PY_VERSION",
    "PYTHON_VERSION",
    "MAX_EMBED_DESCRIPTION_LENGTH",
    "MAX_TEXT_INPUT_LENGTH",
)

try:
    ACKBOT_VERSION: str = version("ackbot")
except PackageNotFoundError:
    ACKBOT_VERSION = "0.0.0"

DISCORD_PY_VERSION: str = version("discord.py")
PYTHON_VERSION: str = (
    f"{sys.version_info[0]}.{sys.version_info[1]}.{sys.version_info[2]}"
)

MAX_EMBED_DESCRIPTION_LENGTH: int = 4096

MAX_TEXT_INPUT_LENGTH: int = 1000
