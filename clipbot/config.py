"""Configuration management for the clip bots.

Handles all application configuration including environment variables, the
YAML encoder preset, and default settings. Provides structured configuration
classes for the bot runtime, file storage and sticker encoding.
"""

from pathlib import Path

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings


class StickerConfig(BaseSettings):
    """ffmpeg parameters for sticker-ready clips.

    Attributes:
        size: Side of the square output frame in pixels.
        duration: Maximum clip length in seconds.
        video_codec: Output video codec.
        video_bitrate: Target video bitrate passed to ffmpeg.
        container: Output file extension.
    """
    size: int = 512
    duration: int = 3
    video_codec: str = "libvpx-vp9"
    video_bitrate: str = "400k"
    container: str = "webm"


class StorageConfig(BaseSettings):
    """Local filesystem locations.

    Attributes:
        work_dir: Scratch directory for downloaded and encoded videos.
        voice_dir: Directory holding stored voice clips.
        voice_max_duration: Longest voice message accepted for storage, seconds.
    """
    work_dir: str = Field(default="data/work", validation_alias="WORK_DIR")
    voice_dir: str = Field(default="data/voices", validation_alias="VOICE_DIR")
    voice_max_duration: int = Field(default=60, validation_alias="VOICE_MAX_DURATION")


class BotConfig(BaseSettings):
    """Main Telegram bot configuration.

    Attributes:
        video_bot_token: Token of the video sticker bot.
        voice_bot_token: Token of the voice clip bot.
        port: Port for the webhook listener or the health listener.
        listen_host: Interface the webhook listener binds to.
        webhook_domain_env: Explicit public domain for webhooks.
        render_external_hostname: Render public hostname (fallback).
        webhook_secret: Secret token Telegram echoes back on webhook calls.
        health_server_enabled: Whether polling bots expose a health listener.
        log_level: Root logging level.
        read_timeout: HTTP read timeout for Bot API calls in seconds.
        write_timeout: HTTP write timeout for Bot API calls in seconds.
        connect_timeout: HTTP connect timeout for Bot API calls in seconds.
    """
    video_bot_token: str | None = Field(default=None, validation_alias="VIDEOSTICKERS_BOT_TOKEN")
    voice_bot_token: str | None = Field(default=None, validation_alias="VOICECLIPS_BOT_TOKEN")
    port: int = Field(default=5000, validation_alias="PORT")
    listen_host: str = Field(default="127.0.0.1", validation_alias="BOT_LISTEN_HOST")
    webhook_domain_env: str | None = Field(default=None, validation_alias="WEBHOOK_DOMAIN")
    render_external_hostname: str | None = Field(
        default=None, validation_alias="RENDER_EXTERNAL_HOSTNAME"
    )
    webhook_secret: str | None = Field(default=None, validation_alias="WEBHOOK_SECRET")
    health_server_enabled: bool = Field(default=True, validation_alias="HEALTH_SERVER_ENABLED")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    read_timeout: float = 30
    write_timeout: float = 30
    connect_timeout: float = 10

    @property
    def webhook_domain(self) -> str | None:
        """Get public domain for webhook delivery.

        Returns:
            Domain string if available, None for polling mode.
        """
        return self.webhook_domain_env or self.render_external_hostname

    @property
    def use_webhook(self) -> bool:
        """Determine if webhook mode can be used.

        Returns:
            True if webhook domain is configured, False otherwise.
        """
        return bool(self.webhook_domain)


class Config:
    """Application configuration manager.

    Centralizes loading of environment settings and the YAML encoder preset.
    """

    def __init__(self, config_dir: Path | None = None):
        """Initialize configuration manager.

        Args:
            config_dir: Path to configuration directory, defaults to clipbot/config.
        """
        if config_dir is None:
            config_dir = Path(__file__).parent / "config"

        self.config_dir = Path(config_dir)

        self.bot = BotConfig()
        self.storage = StorageConfig()
        self.sticker = self._load_sticker_preset()

    def _load_sticker_preset(self) -> StickerConfig:
        """Load the sticker encoder preset from YAML.

        Returns:
            StickerConfig built from sticker.yml, or defaults if it is missing.
        """
        preset_path = self.config_dir / "sticker.yml"
        if not preset_path.exists():
            return StickerConfig()

        with open(preset_path) as f:
            data = yaml.safe_load(f) or {}

        video = data.get("video", {})
        return StickerConfig(
            size=data.get("size", 512),
            duration=data.get("duration", 3),
            video_codec=video.get("codec", "libvpx-vp9"),
            video_bitrate=video.get("bitrate", "400k"),
            container=data.get("container", "webm"),
        )


# Global configuration instance
config = Config()
