"""Tests for bot command menu publishing."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from clipbot.bot.commands import (
    MAX_COMMANDS,
    VIDEO_COMMANDS,
    publish_commands,
    publish_video_commands,
    publish_voice_commands,
    voice_menu,
)


def _application() -> MagicMock:
    application = MagicMock()
    application.bot = AsyncMock()
    return application


def test_voice_menu_lists_builtins_then_clips(store, make_clip):
    make_clip("zoo")
    make_clip("bark")

    commands = [command.command for command in voice_menu(store)]

    assert commands == ["start", "help", "add", "list", "delete", "cancel", "bark", "zoo"]


@pytest.mark.asyncio
async def test_publish_deletes_before_setting():
    application = _application()
    calls = []
    application.bot.delete_my_commands.side_effect = lambda: calls.append("delete")
    application.bot.set_my_commands.side_effect = lambda commands: calls.append("set")

    await publish_video_commands(application)

    assert calls == ["delete", "set"]
    application.bot.set_my_commands.assert_awaited_once_with(VIDEO_COMMANDS)


@pytest.mark.asyncio
async def test_publish_truncates_to_telegram_limit(store, make_clip):
    for index in range(MAX_COMMANDS + 5):
        make_clip(f"clip_{index:03d}")
    application = _application()

    await publish_voice_commands(application, store)

    published = application.bot.set_my_commands.await_args.args[0]
    assert len(published) == MAX_COMMANDS
    assert published[0].command == "start"


@pytest.mark.asyncio
async def test_publish_commands_passes_short_lists_through():
    application = _application()

    await publish_commands(application, [])

    application.bot.set_my_commands.assert_awaited_once_with([])
