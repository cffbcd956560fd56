"""Telegram handlers for the voice clip bot.

Users name a clip with ``/add <name>``, then send a voice message that is
stored under that name. Sending ``/<name>`` (or just the name) replays it.
"""

import logging
from datetime import timedelta

from telegram import Update
from telegram.ext import ContextTypes

from ..config import config
from ..services.voice_store import voice_store
from .commands import publish_voice_commands
from .messages import (
    VOICE_ADD_USAGE,
    VOICE_CANCELLED,
    VOICE_DELETE_USAGE,
    VOICE_DELETED,
    VOICE_INVALID_NAME,
    VOICE_LIST_EMPTY,
    VOICE_LIST_HEADER,
    VOICE_NAME_TAKEN,
    VOICE_NO_PENDING,
    VOICE_NOT_FOUND,
    VOICE_NOTHING_TO_CANCEL,
    VOICE_SAVE_ERROR,
    VOICE_SAVED,
    VOICE_SEND_ERROR,
    VOICE_SEND_NOW,
    VOICE_START_MESSAGE,
    VOICE_TOO_LONG,
)
from .voice_requests import clear_request, pending_name, request_clip

logger = logging.getLogger(__name__)


async def start(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /start and /help commands."""
    if update.message:
        await update.message.reply_text(VOICE_START_MESSAGE)


async def add_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /add <name>: wait for a voice message to store under ``name``."""
    if not update.message or not update.effective_user:
        return

    if not context.args:
        await update.message.reply_text(VOICE_ADD_USAGE)
        return

    raw_name = context.args[0]
    try:
        name = voice_store.normalize_name(raw_name)
    except ValueError:
        await update.message.reply_text(VOICE_INVALID_NAME.format(name=raw_name))
        return

    if voice_store.exists(name):
        await update.message.reply_text(VOICE_NAME_TAKEN.format(name=name))
        return

    request_clip(update.effective_user.id, name)
    await update.message.reply_text(VOICE_SEND_NOW.format(name=name))


async def cancel_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /cancel: forget the pending /add request."""
    if not update.message or not update.effective_user:
        return

    name = clear_request(update.effective_user.id)
    if name:
        await update.message.reply_text(VOICE_CANCELLED.format(name=name))
    else:
        await update.message.reply_text(VOICE_NOTHING_TO_CANCEL)


async def list_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /list: show every stored clip as a command."""
    if not update.message:
        return

    clips = voice_store.list()
    if not clips:
        await update.message.reply_text(VOICE_LIST_EMPTY)
        return

    lines = [VOICE_LIST_HEADER, *(clip.command for clip in clips)]
    await update.message.reply_text("\n".join(lines))


async def delete_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /delete <name>."""
    if not update.message:
        return

    if not context.args:
        await update.message.reply_text(VOICE_DELETE_USAGE)
        return

    raw_name = context.args[0]
    try:
        name = voice_store.normalize_name(raw_name)
    except ValueError:
        await update.message.reply_text(VOICE_NOT_FOUND.format(name=raw_name.lstrip("/")))
        return

    if not voice_store.delete(name):
        await update.message.reply_text(VOICE_NOT_FOUND.format(name=name))
        return

    await update.message.reply_text(VOICE_DELETED.format(name=name))
    await _refresh_menu(context)


async def handle_voice(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Store a voice message under the user's pending clip name.

    Args:
        update: Telegram update object containing the voice message.
        context: Bot context used for the download.
    """
    message = update.message
    if message is None or message.voice is None or not update.effective_user:
        return

    user_id = update.effective_user.id
    name = pending_name(user_id)
    if name is None:
        await message.reply_text(VOICE_NO_PENDING)
        return

    duration = message.voice.duration
    if isinstance(duration, timedelta):
        duration = int(duration.total_seconds())
    limit = config.storage.voice_max_duration
    if duration > limit:
        await message.reply_text(VOICE_TOO_LONG.format(duration=duration, limit=limit))
        return

    if voice_store.exists(name):
        clear_request(user_id)
        await message.reply_text(VOICE_NAME_TAKEN.format(name=name))
        return

    target = voice_store.path_for(name)
    try:
        telegram_file = await context.bot.get_file(message.voice.file_id)
        await telegram_file.download_to_drive(target)
    except Exception as e:
        logger.error(f"User {user_id}: failed to store voice clip /{name}: {e}", exc_info=True)
        target.unlink(missing_ok=True)
        await message.reply_text(VOICE_SAVE_ERROR)
        return

    clear_request(user_id)
    logger.info(f"User {user_id}: stored voice clip /{name} at {target}")
    await message.reply_text(VOICE_SAVED.format(name=name))
    await _refresh_menu(context)


async def replay_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Replay the clip named by an unrecognised ``/<name>`` command."""
    message = update.message
    if message is None or not message.text:
        return

    command, _, mention = message.text.split()[0].partition("@")
    # Commands addressed to another bot in a group chat
    if mention and mention.lower() != (context.bot.username or "").lower():
        return

    if not await _send_clip(update, command):
        await message.reply_text(VOICE_NOT_FOUND.format(name=command.lstrip("/")))


async def replay_text(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Replay the clip whose name matches a plain text message, if any."""
    message = update.message
    if message is None or not message.text:
        return

    await _send_clip(update, message.text.strip())


async def _send_clip(update: Update, raw_name: str) -> bool:
    """Send a stored clip as a voice message.

    Returns:
        True if the clip exists (even if sending failed), False otherwise.
    """
    if update.message is None:
        return False

    try:
        name = voice_store.normalize_name(raw_name)
    except ValueError:
        return False

    clip = voice_store.get(name)
    if clip is None:
        return False

    try:
        with open(clip.path, "rb") as f:
            await update.message.reply_voice(voice=f)
    except Exception as e:
        logger.error(f"Failed to send voice clip /{name}: {e}", exc_info=True)
        await update.message.reply_text(VOICE_SEND_ERROR)
    return True


async def _refresh_menu(context: ContextTypes.DEFAULT_TYPE) -> None:
    try:
        await publish_voice_commands(context.application, voice_store)
    except Exception as e:
        logger.warning(f"Failed to refresh command menu: {e}")
