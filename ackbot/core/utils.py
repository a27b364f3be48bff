from typing import TypeGuard

from ackbot.core.ack_bot import AckBot


def is_ack_bot(obj: object) -> TypeGuard[AckBot]:
    return isinstance(obj, AckBot)
