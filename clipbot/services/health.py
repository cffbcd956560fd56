"""Keep-alive HTTP listener for polling deployments.

Hosting platforms such as Render only keep a web service running while
something answers on ``$PORT``. Polling bots have no listener of their own,
so this small aiohttp app answers every GET with a status line.
"""

import logging

from aiohttp import web

logger = logging.getLogger(__name__)

STATUS_TEXT = "🟢 Telegram bot is running."


async def health(request: web.Request) -> web.Response:
    """Report that the bot process is alive."""
    return web.Response(text=STATUS_TEXT)


def create_health_app() -> web.Application:
    app = web.Application()
    app.router.add_get("/", health)
    app.router.add_get("/{tail:.*}", health)
    return app


class HealthServer:
    """Runs the health app alongside the bot's event loop."""

    def __init__(self, host: str = "0.0.0.0", port: int = 5000):
        self.host = host
        self.port = port
        self._runner: web.AppRunner | None = None

    @property
    def running(self) -> bool:
        return self._runner is not None

    async def start(self) -> None:
        """Bind the listener; a second call is a no-op."""
        if self._runner is not None:
            return

        runner = web.AppRunner(create_health_app())
        await runner.setup()
        site = web.TCPSite(runner, self.host, self.port)
        await site.start()
        self._runner = runner
        logger.info("Health server running on %s:%s", self.host, self.port)

    async def stop(self) -> None:
        if self._runner is None:
            return

        await self._runner.cleanup()
        self._runner = None
        logger.info("Health server stopped")
