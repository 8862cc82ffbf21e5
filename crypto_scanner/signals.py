"""Turn the exchange's all-market ticker stream into gainer signals."""

from __future__ import annotations

import asyncio
import json
import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

import websockets
from websockets.exceptions import ConnectionClosed

logger = logging.getLogger(__name__)

BINANCE_URL = "wss://stream.binance.com:9443/ws/!ticker@arr"
MIN_PCT_GAIN = 5.0
MIN_QUOTE_VOLUME = 1_000_000.0
RECONNECT_DELAYS = (2, 4, 8, 16)

_FLOAT_RE = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)",
    re.IGNORECASE,
)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Signal:
    """A symbol that gained enough over 24 hours on enough volume."""

    symbol: str
    pct_gain_24h: float
    quote_vol_usdt: float
    last_price: float
    ts: datetime = field(default_factory=_utc_now)

    def to_json(self) -> str:
        """Serialise the signal as a JSON object."""
        stamp = self.ts.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")
        return json.dumps(
            {
                "symbol": self.symbol,
                "pct_gain_24h": self.pct_gain_24h,
                "quote_vol_usdt": self.quote_vol_usdt,
                "last_price": self.last_price,
                "ts": stamp,
            },
            separators=(",", ":"),
        )


def _parse_number(value: str) -> float:
    if not _FLOAT_RE.fullmatch(value):
        raise ValueError(f"invalid float literal: {value!r}")
    return float(value)


def _string_field(entry: Any, key: str) -> str | None:
    if isinstance(entry, dict):
        value = entry.get(key)
        if isinstance(value, str):
            return value
    return None


def _number_field(entry: Any, key: str) -> float:
    text = _string_field(entry, key)
    return _parse_number("0" if text is None else text)


def extract_signals(text: str) -> list[Signal]:
    """Parse a ticker array and keep entries gaining >= 5% on >= $1M volume.

    Raises ValueError for malformed JSON or malformed numeric strings.
    Anything that is not a JSON array yields no signals.
    """
    parsed = json.loads(text)
    if not isinstance(parsed, list):
        return []

    signals = []
    for entry in parsed:
        pct = _number_field(entry, "P")
        vol = _number_field(entry, "q")
        if pct >= MIN_PCT_GAIN and vol >= MIN_QUOTE_VOLUME:
            symbol = _string_field(entry, "s")
            if symbol is None:
                raise ValueError("ticker entry has no symbol")
            signals.append(
                Signal(
                    symbol=symbol,
                    pct_gain_24h=pct,
                    quote_vol_usdt=vol,
                    last_price=_number_field(entry, "c"),
                )
            )
    return signals


async def handle_socket(ws: Any, publish: Callable[[str], Any]) -> None:
    """Publish every signal found in the text frames of ``ws`` as JSON.

    Binary frames are ignored; ping frames are answered by the connection.
    The function returns when the connection closes.
    """
    try:
        async for frame in ws:
            if isinstance(frame, str):
                for signal in extract_signals(frame):
                    publish(signal.to_json())
    except ConnectionClosed:
        return


async def _probe(url: str) -> bool:
    try:
        async with websockets.connect(url):
            return True
    except (OSError, asyncio.TimeoutError, websockets.exceptions.WebSocketException):
        return False


async def run_binance_feed(
    publish: Callable[[str], Any], url: str = BINANCE_URL
) -> None:
    """Stream tickers from ``url`` forever, reconnecting with back-off."""
    while True:
        try:
            async with websockets.connect(url) as ws:
                logger.info("\U0001f7e2 Connected to Binance stream")
                try:
                    await handle_socket(ws, publish)
                except Exception as exc:  # noqa: BLE001 - keep the feed alive
                    logger.warning("Binance WS error: %r", exc)
        except (
            OSError,
            asyncio.TimeoutError,
            websockets.exceptions.WebSocketException,
        ) as exc:
            logger.error("WS connect failed: %r", exc)

        for delay in RECONNECT_DELAYS:
            logger.info("Reconnect in %ss", delay)
            await asyncio.sleep(delay)
            if await _probe(url):
                break