from datetime import datetime
from typing import Any, Mapping, Optional

from discord.utils import utcnow

__all__ = (
    "dict_without_falsies",
    "timestamp_ms",
)


def dict_without_falsies(d: Optional[Mapping[str, Any]] = None, **kwargs):
    dd = dict(d, **kwargs) if d else kwargs
    return {k: v for k, v in dd.items() if v}


def timestamp_ms(dt: Optional[datetime] = None) -> int:
    """
    Return `dt` (or the current time) as milliseconds since the Unix epoch.
    """
    return int((dt or utcnow()).timestamp() * 1000)
