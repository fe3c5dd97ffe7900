"""
Minimal HTTP endpoint so hosting platforms (e.g. Render) see a live web
service. It shares the bot's event loop and touches none of its state.
"""

from __future__ import annotations

import logging

from aiohttp import web


logger = logging.getLogger(__name__)

LIVENESS_TEXT = "Hypixel Verification Bot is online and running!"


async def handle_root(request: web.Request) -> web.Response:
    return web.Response(text=LIVENESS_TEXT)


def create_keepalive_app() -> web.Application:
    app = web.Application()
    app.router.add_get("/", handle_root)
    return app


async def start_keepalive_server(host: str, port: int) -> web.AppRunner:
    """Start the liveness server and return its runner; call `cleanup()` to stop."""

    runner = web.AppRunner(create_keepalive_app())
    await runner.setup()
    site = web.TCPSite(runner, host, port)
    await site.start()
    logger.info("Web server started on %s:%s", host, port)
    return runner
