"""ffmpeg wrapper producing Telegram video sticker clips.

Crops the centre square of the input, scales it to the sticker size, limits
the duration and re-encodes to VP9 without audio.
"""

import logging
from pathlib import Path

import ffmpeg
from ffmpeg.nodes import OutputStream

from ..config import StickerConfig, config

logger = logging.getLogger(__name__)


def build_sticker_stream(
    source: Path, target: Path, preset: StickerConfig | None = None
) -> OutputStream:
    """Build the ffmpeg graph for a sticker clip.

    Args:
        source: Input video file.
        target: Output file, overwritten if present.
        preset: Encoding parameters, defaults to the global sticker preset.

    Returns:
        Output stream ready to be compiled or run.
    """
    preset = preset or config.sticker
    side = "min(iw,ih)"

    return (
        ffmpeg.input(str(source))
        .filter("crop", side, side)
        .filter("scale", preset.size, preset.size)
        .output(
            str(target),
            t=preset.duration,
            vcodec=preset.video_codec,
            video_bitrate=preset.video_bitrate,
            an=None,
            movflags="+faststart",
        )
        .overwrite_output()
    )


def build_sticker_command(
    source: Path, target: Path, preset: StickerConfig | None = None
) -> list[str]:
    """Return the ffmpeg argument list for a sticker clip."""
    return build_sticker_stream(source, target, preset).compile()


def encode_sticker(source: Path, target: Path, preset: StickerConfig | None = None) -> Path:
    """Encode a video into a sticker-ready clip.

    Blocks until ffmpeg exits; call it from a worker thread inside handlers.

    Args:
        source: Input video file.
        target: Output file.
        preset: Encoding parameters, defaults to the global sticker preset.

    Returns:
        Path of the encoded clip.

    Raises:
        RuntimeError: If ffmpeg fails or produces no output.
    """
    logger.info("Encoding %s -> %s", source, target)
    stream = build_sticker_stream(source, target, preset)

    try:
        stream.run(capture_stdout=True, capture_stderr=True)
    except ffmpeg.Error as e:
        stderr = e.stderr.decode("utf-8", errors="replace") if e.stderr else ""
        logger.error("ffmpeg failed for %s: %s", source, stderr)
        raise RuntimeError(f"ffmpeg failed: {stderr.strip()[-500:]}") from e

    if not target.exists() or target.stat().st_size == 0:
        raise RuntimeError(f"ffmpeg produced no output for {source}")

    logger.info("Encoded %s (%d bytes)", target, target.stat().st_size)
    return target
