"""Tests for bot configuration and the sticker preset."""

from clipbot.config import BotConfig, Config, StorageConfig


def test_bot_config_listen_host_defaults_to_localhost(monkeypatch) -> None:
    """BotConfig should bind to localhost by default for safer webhooks."""
    monkeypatch.delenv("BOT_LISTEN_HOST", raising=False)

    bot_config = BotConfig()

    assert bot_config.listen_host == "127.0.0.1"


def test_bot_config_listen_host_env_override(monkeypatch) -> None:
    """Environment variable must override listen host when explicitly set."""
    monkeypatch.setenv("BOT_LISTEN_HOST", "0.0.0.0")

    bot_config = BotConfig()

    assert bot_config.listen_host == "0.0.0.0"


def test_bot_config_reads_tokens_from_environment() -> None:
    bot_config = BotConfig()

    assert bot_config.video_bot_token == "123456:video_token_placeholder"
    assert bot_config.voice_bot_token == "654321:voice_token_placeholder"


def test_bot_config_port_defaults_to_5000(monkeypatch) -> None:
    monkeypatch.delenv("PORT", raising=False)

    assert BotConfig().port == 5000


def test_webhook_disabled_without_domain(monkeypatch) -> None:
    monkeypatch.delenv("WEBHOOK_DOMAIN", raising=False)
    monkeypatch.delenv("RENDER_EXTERNAL_HOSTNAME", raising=False)

    bot_config = BotConfig()

    assert bot_config.webhook_domain is None
    assert bot_config.use_webhook is False


def test_explicit_webhook_domain_wins_over_render_hostname(monkeypatch) -> None:
    monkeypatch.setenv("WEBHOOK_DOMAIN", "bots.example.com")
    monkeypatch.setenv("RENDER_EXTERNAL_HOSTNAME", "clipbot.onrender.com")

    bot_config = BotConfig()

    assert bot_config.webhook_domain == "bots.example.com"
    assert bot_config.use_webhook is True


def test_render_hostname_used_as_fallback(monkeypatch) -> None:
    monkeypatch.delenv("WEBHOOK_DOMAIN", raising=False)
    monkeypatch.setenv("RENDER_EXTERNAL_HOSTNAME", "clipbot.onrender.com")

    assert BotConfig().webhook_domain == "clipbot.onrender.com"


def test_storage_config_env_override(monkeypatch) -> None:
    monkeypatch.setenv("VOICE_DIR", "/srv/voices")
    monkeypatch.setenv("VOICE_MAX_DURATION", "15")

    storage = StorageConfig()

    assert storage.voice_dir == "/srv/voices"
    assert storage.voice_max_duration == 15


def test_bundled_sticker_preset_matches_telegram_limits() -> None:
    sticker = Config().sticker

    assert sticker.size == 512
    assert sticker.duration == 3
    assert sticker.video_codec == "libvpx-vp9"
    assert sticker.video_bitrate == "400k"
    assert sticker.container == "webm"


def test_sticker_preset_loaded_from_yaml(tmp_path) -> None:
    (tmp_path / "sticker.yml").write_text(
        "size: 256\nduration: 2\nvideo:\n  bitrate: 300k\n"
    )

    sticker = Config(config_dir=tmp_path).sticker

    assert sticker.size == 256
    assert sticker.duration == 2
    assert sticker.video_bitrate == "300k"
    assert sticker.video_codec == "libvpx-vp9"


def test_sticker_preset_defaults_without_yaml(tmp_path) -> None:
    sticker = Config(config_dir=tmp_path).sticker

    assert sticker.size == 512
    assert sticker.video_bitrate == "400k"
