"""HTTP and WebSocket server that fans out gainer signals to browsers."""

from __future__ import annotations

import argparse
import asyncio
import contextlib
import logging
import sys
from collections.abc import AsyncIterator, Sequence
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from aiohttp import WSMsgType, web

from crypto_scanner.signals import run_binance_feed

logger = logging.getLogger(__name__)

VERSION = "0.1.0"
INITIAL_MESSAGE = "{}"


class Broadcaster:
    """Holds the latest message and wakes every subscriber when it changes.

    A subscriber receives only the most recent message: updates that arrive
    while it is busy are coalesced. A subscriber that joins after something
    was published receives that latest message straight away.
    """

    def __init__(self, initial: str = INITIAL_MESSAGE) -> None:
        self.latest = initial
        self.clients_count = 0
        self._version = 0
        self._changed = asyncio.Event()

    def publish(self, message: str) -> None:
        """Replace the latest message and notify all subscribers."""
        self.latest = message
        self._version += 1
        changed, self._changed = self._changed, asyncio.Event()
        changed.set()

    async def subscribe(self) -> AsyncIterator[str]:
        """Yield the latest message each time a newer one is published."""
        seen = 0
        while True:
            changed = self._changed
            if self._version > seen:
                seen = self._version
                yield self.latest
            else:
                await changed.wait()


BROADCASTER_KEY = web.AppKey("broadcaster", Broadcaster)
STATIC_DIR_KEY = web.AppKey("static_dir", Path)


async def version_handler(request: web.Request) -> web.Response:
    """Report the service version as JSON."""
    del request
    return web.json_response({"version": VERSION})


async def _forward(ws: web.WebSocketResponse, broadcaster: Broadcaster) -> None:
    async for message in broadcaster.subscribe():
        try:
            await ws.send_str(message)
        except (ConnectionError, RuntimeError):
            return


async def _drain(ws: web.WebSocketResponse) -> None:
    async for msg in ws:
        if msg.type == WSMsgType.ERROR:
            return


async def websocket_handler(request: web.Request) -> web.WebSocketResponse:
    """Stream every published signal to the connected client until it leaves."""
    ws = web.WebSocketResponse()
    await ws.prepare(request)
    broadcaster = request.app[BROADCASTER_KEY]
    broadcaster.clients_count += 1
    send_task = asyncio.create_task(_forward(ws, broadcaster))
    recv_task = asyncio.create_task(_drain(ws))
    try:
        await asyncio.wait({send_task, recv_task}, return_when=asyncio.FIRST_COMPLETED)
    finally:
        for task in (send_task, recv_task):
            task.cancel()
        for task in (send_task, recv_task):
            with contextlib.suppress(asyncio.CancelledError):
                await task
        broadcaster.clients_count -= 1
    return ws


async def _serve_static(request: web.Request) -> web.StreamResponse:
    root = request.app[STATIC_DIR_KEY]
    target = (root / request.match_info["path"]).resolve()
    if target != root and root not in target.parents:
        raise web.HTTPNotFound()
    if target.is_dir():
        target = target / "index.html"
    if not target.is_file():
        raise web.HTTPNotFound()
    return web.FileResponse(target)


async def _feed_context(app: web.Application) -> AsyncIterator[None]:
    task = asyncio.create_task(run_binance_feed(app[BROADCASTER_KEY].publish))
    yield
    task.cancel()
    with contextlib.suppress(asyncio.CancelledError):
        await task


def create_app(
    static_dir: str | Path = "static", start_feed: bool = True
) -> web.Application:
    """Build the application: version endpoint, signal socket and static files."""
    app = web.Application()
    app[BROADCASTER_KEY] = Broadcaster()
    app[STATIC_DIR_KEY] = Path(static_dir).resolve()
    app.router.add_get("/version", version_handler)
    app.router.add_get("/websocket", websocket_handler)
    app.router.add_get("/{path:.*}", _serve_static)
    if start_feed:
        app.cleanup_ctx.append(_feed_context)
    return app


def _configure_logging(log_dir: Path) -> None:
    root = logging.getLogger()
    if root.handlers:
        return
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(message)s")
    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(formatter)
    root.addHandler(console)
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            log_dir / "server.log", when="midnight", utc=True
        )
    except OSError as exc:
        logger.warning("cannot open log file: %r", exc)
    else:
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
    root.setLevel(logging.INFO)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the server until interrupted."""
    parser = argparse.ArgumentParser(description="Serve live crypto gainer signals.")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--static", default="static", help="directory of static files")
    parser.add_argument("--logs", default="logs", help="directory for log files")
    args = parser.parse_args(argv)

    _configure_logging(Path(args.logs))
    web.run_app(create_app(args.static), host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())