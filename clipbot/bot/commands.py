"""Bot command menu publishing.

Replaces the command list Telegram shows in the client menu. The voice bot
lists every stored clip after its own commands.
"""

import logging
from typing import Final

from telegram import BotCommand
from telegram.ext import Application

from ..services.voice_store import VoiceStore
from .messages import (
    COMMAND_ADD,
    COMMAND_CANCEL,
    COMMAND_CLIP,
    COMMAND_DELETE,
    COMMAND_HELP,
    COMMAND_LIST,
    COMMAND_START,
)

logger = logging.getLogger(__name__)

# Telegram rejects longer command lists
MAX_COMMANDS: Final[int] = 100

VIDEO_COMMANDS: Final[list[BotCommand]] = [BotCommand("start", COMMAND_START)]

VOICE_COMMANDS: Final[list[BotCommand]] = [
    BotCommand("start", COMMAND_START),
    BotCommand("help", COMMAND_HELP),
    BotCommand("add", COMMAND_ADD),
    BotCommand("list", COMMAND_LIST),
    BotCommand("delete", COMMAND_DELETE),
    BotCommand("cancel", COMMAND_CANCEL),
]


async def publish_commands(application: Application, commands: list[BotCommand]) -> None:
    """Delete the current command list and publish ``commands``.

    Args:
        application: Telegram Application whose bot is updated.
        commands: Commands in menu order, truncated to Telegram's limit.
    """
    await application.bot.delete_my_commands()
    await application.bot.set_my_commands(commands[:MAX_COMMANDS])
    logger.info("Published %d bot commands", min(len(commands), MAX_COMMANDS))


def voice_menu(store: VoiceStore) -> list[BotCommand]:
    """Built-in voice bot commands followed by one command per stored clip."""
    clips = [BotCommand(clip.name, COMMAND_CLIP.format(name=clip.name)) for clip in store.list()]
    return [*VOICE_COMMANDS, *clips]


async def publish_video_commands(application: Application) -> None:
    await publish_commands(application, VIDEO_COMMANDS)


async def publish_voice_commands(application: Application, store: VoiceStore) -> None:
    await publish_commands(application, voice_menu(store))
