"""Data models for the clip bots.

Defines Pydantic models for the work items passed between handlers and
services: a video sticker job and a stored voice clip.
"""

from datetime import datetime
from pathlib import Path

from pydantic import BaseModel


class StickerJob(BaseModel):
    """One video-to-sticker conversion.

    Attributes:
        user_id: Telegram user ID of the sender, 0 when unknown.
        chat_id: Chat the result is sent to.
        file_id: Telegram file ID of the uploaded video.
        source_path: Where the original upload is downloaded.
        output_path: Where the encoded clip is written.
    """

    user_id: int
    chat_id: int
    file_id: str
    source_path: Path
    output_path: Path

    @classmethod
    def for_user(
        cls, work_dir: Path, user_id: int, chat_id: int, file_id: str, container: str = "webm"
    ) -> "StickerJob":
        """Build a job with per-user scratch file names."""
        return cls(
            user_id=user_id,
            chat_id=chat_id,
            file_id=file_id,
            source_path=work_dir / f"{user_id}.mp4",
            output_path=work_dir / f"{user_id}out.{container}",
        )


class VoiceClip(BaseModel):
    """Stored voice clip.

    Attributes:
        name: Command name the clip is replayed by.
        path: Location of the OGG/Opus file.
        size_bytes: File size on disk.
        created_at: Modification time of the file.
    """

    name: str
    path: Path
    size_bytes: int
    created_at: datetime

    @property
    def command(self) -> str:
        return f"/{self.name}"
