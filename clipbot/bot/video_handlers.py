"""Telegram handlers for the video sticker bot.

The bot accepts a video or a video note, crops and re-encodes it into a
sticker-ready WebM clip and sends the clip back so the user can forward it
to the official sticker bot.
"""

import asyncio
import logging
from pathlib import Path

from telegram import Message, Update
from telegram.ext import ContextTypes

from ..config import config
from ..models import StickerJob
from ..services.encoder import encode_sticker
from .messages import (
    VIDEO_DONE,
    VIDEO_ERROR,
    VIDEO_FILE_NOT_FOUND,
    VIDEO_PROCESSING,
    VIDEO_START_MESSAGE,
)

logger = logging.getLogger(__name__)


def cleanup_files(*paths: Path) -> None:
    """Remove temporary files, logging instead of raising on failure."""
    for path in paths:
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            logger.error(f"Failed to remove temporary file {path}: {e}")


def _video_file_id(message: Message) -> str | None:
    if message.video:
        return message.video.file_id
    if message.video_note:
        return message.video_note.file_id
    return None


async def start(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /start command with usage instructions."""
    if update.message:
        await update.message.reply_text(VIDEO_START_MESSAGE)


async def handle_video(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Convert an uploaded video or video note into a sticker clip.

    Downloads the upload into the work directory, encodes it in a worker
    thread and replies with the result. Temporary files are always removed
    and the user always gets a closing message, even after an error.

    Args:
        update: Telegram update object containing the video message.
        context: Bot context used for file download and upload.
    """
    message = update.message
    if message is None:
        return

    chat_id = message.chat.id
    file_id = _video_file_id(message)
    if not file_id:
        await context.bot.send_message(chat_id=chat_id, text=VIDEO_FILE_NOT_FOUND)
        return

    user_id = message.from_user.id if message.from_user else 0
    work_dir = Path(config.storage.work_dir)
    job = StickerJob.for_user(
        work_dir, user_id, chat_id, file_id, container=config.sticker.container
    )

    try:
        await context.bot.send_message(chat_id=chat_id, text=VIDEO_PROCESSING)
        work_dir.mkdir(parents=True, exist_ok=True)

        telegram_file = await context.bot.get_file(job.file_id)
        logger.info(f"User {user_id}: downloading {job.file_id} to {job.source_path}")
        await telegram_file.download_to_drive(job.source_path)

        await asyncio.to_thread(encode_sticker, job.source_path, job.output_path)

        with open(job.output_path, "rb") as clip:
            await context.bot.send_video(
                chat_id=chat_id, video=clip, filename=job.output_path.name
            )
        logger.info(f"User {user_id}: sticker clip sent")

    except Exception as e:
        logger.error(f"User {user_id}: failed to process video {job.file_id}: {e}", exc_info=True)
        await context.bot.send_message(chat_id=chat_id, text=VIDEO_ERROR)

    finally:
        cleanup_files(job.source_path, job.output_path)

    await context.bot.send_message(chat_id=chat_id, text=VIDEO_DONE)
