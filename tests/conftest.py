"""Global test configuration and fixtures.

Provides shared fixtures for all test levels including environment setup,
mocked Telegram updates and contexts, and an isolated voice clip store.
"""

import os
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from clipbot.bot import voice_requests
from clipbot.config import config
from clipbot.services.voice_store import VoiceStore

# Test constants
TEST_VIDEO_TOKEN = os.getenv("TEST_VIDEO_TOKEN", "123456:video_token_placeholder")
TEST_VOICE_TOKEN = os.getenv("TEST_VOICE_TOKEN", "654321:voice_token_placeholder")
TEST_USER_ID = 4242
TEST_CHAT_ID = 1001


@pytest.fixture(autouse=True)
def test_environment():
    """Setup test environment variables for all tests."""
    test_env = {
        'VIDEOSTICKERS_BOT_TOKEN': TEST_VIDEO_TOKEN,
        'VOICECLIPS_BOT_TOKEN': TEST_VOICE_TOKEN,
        'HEALTH_SERVER_ENABLED': 'false',
        'LOG_LEVEL': 'DEBUG'
    }

    # Store original values
    original_env = {}
    for key, value in test_env.items():
        original_env[key] = os.environ.get(key)
        os.environ[key] = value

    yield

    # Restore original values
    for key, original_value in original_env.items():
        if original_value is None:
            os.environ.pop(key, None)
        else:
            os.environ[key] = original_value


@pytest.fixture(autouse=True)
def clean_pending_requests():
    """Pending /add requests are module state; reset them around each test."""
    voice_requests.pending_requests.clear()
    yield
    voice_requests.pending_requests.clear()


@pytest.fixture
def work_dir(tmp_path, monkeypatch) -> Path:
    """Point the video scratch directory at a temporary path."""
    path = tmp_path / "work"
    monkeypatch.setattr(config.storage, "work_dir", str(path))
    return path


@pytest.fixture
def store(tmp_path) -> VoiceStore:
    """Voice store rooted in a temporary directory, used by the handlers."""
    voice_store = VoiceStore(tmp_path / "voices")
    with patch("clipbot.bot.voice_handlers.voice_store", voice_store):
        yield voice_store


@pytest.fixture
def make_clip(store):
    """Create a stored clip file with dummy content."""
    def _make_clip(name: str, content: bytes = b"OggS fake opus") -> Path:
        path = store.path_for(name)
        path.write_bytes(content)
        return path

    return _make_clip


@pytest.fixture
def telegram_file():
    """Telegram File stand-in whose download writes bytes to disk."""
    tg_file = MagicMock()

    async def _download(path):
        Path(path).write_bytes(b"downloaded media")
        return Path(path)

    tg_file.download_to_drive = AsyncMock(side_effect=_download)
    return tg_file


@pytest.fixture
def mock_context(telegram_file):
    """Mock bot context with an async bot and an application."""
    context = MagicMock()
    context.args = []
    context.bot = AsyncMock()
    context.bot.username = "ClipBot"
    context.bot.get_file = AsyncMock(return_value=telegram_file)
    context.application = MagicMock()
    return context


@pytest.fixture
def make_update():
    """Build a mocked message update."""
    def _make_update(
        text: str | None = None,
        user_id: int = TEST_USER_ID,
        chat_id: int = TEST_CHAT_ID,
        username: str = "clip_tester",
    ) -> MagicMock:
        update = MagicMock()
        update.effective_user = MagicMock(id=user_id, username=username)
        message = update.message
        message.text = text
        message.chat.id = chat_id
        message.from_user = update.effective_user
        message.video = None
        message.video_note = None
        message.voice = None
        message.reply_text = AsyncMock()
        message.reply_voice = AsyncMock()
        return update

    return _make_update
