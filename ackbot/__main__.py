from ackbot.core.cli import run

run()
