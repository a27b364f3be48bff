import logging

import discord

__all__ = ("setup_logging",)

DETAILED_FORMAT = "[{asctime}] [{levelname:<8}] {name}: {message}"
SIMPLE_FORMAT = "[{levelname:<8}] {message}"


def setup_logging(level: int | str, detailed: bool = False):
    """
    Configure the root logger through discord.py's logging helper so that our
    loggers and discord.py's loggers share one handler.
    """
    if isinstance(level, str):
        level = logging.getLevelNamesMapping().get(level.upper(), logging.WARNING)

    formatter = logging.Formatter(
        DETAILED_FORMAT if detailed else SIMPLE_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        style="{",
    )
    discord.utils.setup_logging(level=level, formatter=formatter, root=True)
