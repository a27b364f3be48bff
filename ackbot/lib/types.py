from typing import Any, TypeAlias

from discord import Member, User

__all__ = (
    "IDType",
    "ChannelID",
    "JsonObject",
    "MemberOrUser",
)


IDType: TypeAlias = int

ChannelID: TypeAlias = IDType

JsonObject: TypeAlias = dict[str, Any]

MemberOrUser: TypeAlias = Member | User
