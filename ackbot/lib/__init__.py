from ackbot.lib.allowed_mentions import *
from ackbot.lib.color import *
from ackbot.lib.event_data import EventData
from ackbot.lib.exceptions import *
from ackbot.lib.from_data_mixin import *
from ackbot.lib.intents import *
from ackbot.lib.json_serializable import *
from ackbot.lib.types import *
