"""Application entry points.

Builds and runs the three bot variants:

- ``video_main``: video sticker bot, long-polling.
- ``voice_main``: voice clip bot, long-polling.
- ``voice_webhook_main``: voice clip bot receiving updates through a webhook.

Polling variants optionally expose a keep-alive HTTP listener on ``$PORT``.
"""

import logging

from telegram import Update
from telegram.ext import (
    Application,
    CallbackQueryHandler,
    CommandHandler,
    MessageHandler,
    filters,
)

from .bot import video_handlers, voice_handlers
from .bot.commands import publish_video_commands, publish_voice_commands
from .bot.common import error_handler, handle_callback
from .config import config
from .services.health import HealthServer
from .services.voice_store import voice_store

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=config.bot.log_level.upper(),
    )
    # Bot API polling logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


def _require_token(token: str | None, env_name: str) -> str:
    if not token or not token.strip():
        raise RuntimeError(f"Set {env_name} environment variable")
    return token.strip()


def _new_application(token: str) -> Application:
    return (
        Application.builder()
        .token(token)
        .read_timeout(config.bot.read_timeout)
        .write_timeout(config.bot.write_timeout)
        .connect_timeout(config.bot.connect_timeout)
        .build()
    )


def build_video_application(token: str, health: HealthServer | None = None) -> Application:
    """Create the video sticker bot with its handlers registered.

    Args:
        token: Bot API token.
        health: Keep-alive listener started and stopped with the application.

    Returns:
        Configured Application, not yet running.
    """
    app = _new_application(token)

    async def post_init(application: Application) -> None:
        me = await application.bot.get_me()
        logger.info(f"@{me.username} is running")
        await publish_video_commands(application)
        if health:
            await health.start()

    async def post_shutdown(application: Application) -> None:
        if health:
            await health.stop()

    app.post_init = post_init
    app.post_shutdown = post_shutdown

    app.add_handler(CommandHandler("start", video_handlers.start))
    app.add_handler(
        MessageHandler(filters.VIDEO | filters.VIDEO_NOTE, video_handlers.handle_video)
    )
    app.add_handler(CallbackQueryHandler(handle_callback))
    app.add_error_handler(error_handler)
    return app


def build_voice_application(token: str, health: HealthServer | None = None) -> Application:
    """Create the voice clip bot with its handlers registered.

    Built-in commands are registered before the catch-all command handler,
    which replays stored clips.

    Args:
        token: Bot API token.
        health: Keep-alive listener started and stopped with the application.

    Returns:
        Configured Application, not yet running.
    """
    app = _new_application(token)

    async def post_init(application: Application) -> None:
        me = await application.bot.get_me()
        logger.info(f"@{me.username} is running")
        await publish_voice_commands(application, voice_store)
        if health:
            await health.start()

    async def post_shutdown(application: Application) -> None:
        if health:
            await health.stop()

    app.post_init = post_init
    app.post_shutdown = post_shutdown

    app.add_handler(CommandHandler(["start", "help"], voice_handlers.start))
    app.add_handler(CommandHandler("add", voice_handlers.add_command))
    app.add_handler(CommandHandler("cancel", voice_handlers.cancel_command))
    app.add_handler(CommandHandler("list", voice_handlers.list_command))
    app.add_handler(CommandHandler("delete", voice_handlers.delete_command))
    app.add_handler(MessageHandler(filters.VOICE, voice_handlers.handle_voice))
    app.add_handler(MessageHandler(filters.COMMAND, voice_handlers.replay_command))
    app.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, voice_handlers.replay_text))
    app.add_error_handler(error_handler)
    return app


def _health_server() -> HealthServer | None:
    if not config.bot.health_server_enabled:
        return None
    return HealthServer(host="0.0.0.0", port=config.bot.port)


def run_polling(app: Application) -> None:
    logger.info("Starting long-polling")
    app.run_polling(allowed_updates=Update.ALL_TYPES)


def run_webhook(app: Application, token: str) -> None:
    """Serve webhook updates on ``listen_host:port`` at a token-derived path.

    Raises:
        RuntimeError: If no public webhook domain is configured.
    """
    if not config.bot.use_webhook:
        raise RuntimeError("Set WEBHOOK_DOMAIN or RENDER_EXTERNAL_HOSTNAME environment variable")

    path = f"/{token}"
    webhook_url = f"https://{config.bot.webhook_domain}{path}"
    logger.info(f"Starting webhook on {config.bot.listen_host}:{config.bot.port}")

    app.run_webhook(
        listen=config.bot.listen_host,
        port=config.bot.port,
        url_path=path,
        webhook_url=webhook_url,
        secret_token=config.bot.webhook_secret,
        allowed_updates=Update.ALL_TYPES,
    )


def video_main() -> None:
    """Run the video sticker bot.

    Raises:
        RuntimeError: If VIDEOSTICKERS_BOT_TOKEN is not set.
    """
    configure_logging()
    token = _require_token(config.bot.video_bot_token, "VIDEOSTICKERS_BOT_TOKEN")
    run_polling(build_video_application(token, _health_server()))


def voice_main() -> None:
    """Run the voice clip bot with long-polling.

    Raises:
        RuntimeError: If VOICECLIPS_BOT_TOKEN is not set.
    """
    configure_logging()
    token = _require_token(config.bot.voice_bot_token, "VOICECLIPS_BOT_TOKEN")
    run_polling(build_voice_application(token, _health_server()))


def voice_webhook_main() -> None:
    """Run the voice clip bot behind a webhook.

    The listener binds BOT_LISTEN_HOST, which defaults to 127.0.0.1. Hosts that
    route public traffic to the container, such as Render, need
    BOT_LISTEN_HOST=0.0.0.0.

    Raises:
        RuntimeError: If VOICECLIPS_BOT_TOKEN or the webhook domain is not set.
    """
    configure_logging()
    token = _require_token(config.bot.voice_bot_token, "VOICECLIPS_BOT_TOKEN")
    run_webhook(build_voice_application(token), token)


if __name__ == "__main__":
    video_main()
