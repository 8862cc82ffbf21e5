# crypto-scanner

A small asynchronous service that watches the Binance all-market 24h ticker
stream, keeps only the symbols that are moving strongly, and pushes them to
every connected WebSocket client as they arrive.

A ticker entry becomes a signal when both of these hold:

- its 24h percentage gain (`P`) is at least **5 %**, and
- its 24h quote volume (`q`) is at least **1,000,000 USDT**.

Each signal is sent as a compact JSON object, for example:

```json
{"symbol":"BTCUSDT","pct_gain_24h":5.5,"quote_vol_usdt":1500000.0,"last_price":30000.0,"ts":"2024-01-01T12:00:00.123456Z"}
```

`ts` is the UTC time at which the signal was extracted.

## Installation

```console
pip install .
```

For running the test suite:

```console
pip install ".[test]"
pytest
```

## Running the server

```console
crypto-scanner
```

Options:

| Option       | Default   | Meaning                               |
|--------------|-----------|---------------------------------------|
| `--host`     | `0.0.0.0` | address to listen on                  |
| `--port`     | `8000`    | port to listen on                     |
| `--static`   | `static`  | directory of static files             |
| `--logs`     | `logs`    | directory for the log file            |

The server exposes:

| Path          | What it does                                                           |
|---------------|------------------------------------------------------------------------|
| `/version`    | Returns `{"version": "0.1.0"}`                                         |
| `/websocket`  | Sends each new signal to the client as a text frame                    |
| anything else | Serves files from the static directory; a directory serves its `index.html`, missing files give 404 |

A WebSocket client is sent only the most recent message: signals published
while the client is busy are coalesced. A client that connects after a
signal has been published receives that latest signal straight away.

The ticker feed runs in the background for as long as the server runs. When
the connection drops or cannot be made, it waits 2, 4, 8 and then 16 seconds
between probes before connecting again. When no logging handlers are already
installed, logs go to standard output and to `server.log` in the log
directory, rotated at midnight UTC.

## Checking available parallelism

```console
crypto-scanner-parallelism
```

prints the number of logical CPU cores (`cpu_core_count`) and the number of
threads that can run in parallel for this process (`max_parallel_threads`),
both from `crypto_scanner.util`.

## Using it as a library

```python
from crypto_scanner.signals import extract_signals

text = '[{"s": "BTCUSDT", "P": "5.5", "q": "1500000", "c": "30000"}]'
for signal in extract_signals(text):
    print(signal.symbol, signal.pct_gain_24h, signal.to_json())
```

`extract_signals` raises `ValueError` when the text is not valid JSON, when a
numeric field holds a string that is not a number, or when a qualifying entry
has no symbol. Numeric fields that are missing or not strings count as `0`.
Text that is valid JSON but not a list yields no signals.

`crypto_scanner.signals` also provides `handle_socket(ws, publish)`, which
calls `publish` with the JSON of every signal found in a connection's text
frames, and `run_binance_feed(publish, url)`, which does that forever with
reconnection.

To embed the web application in your own aiohttp setup, build it with
`crypto_scanner.server.create_app(static_dir, start_feed)`; pass
`start_feed=False` to leave the ticker feed off. Messages are fanned out by
`crypto_scanner.server.Broadcaster`, whose `publish` replaces the latest
message and whose `subscribe` is an async iterator over new messages.

## Arithmetic tools

`crypto_scanner.calculator` holds two tools, `Adder` and `Subtract`. Each has
a `definition(prompt)` returning a `ToolDefinition` (name, description and a
JSON schema for `x` and `y`) and a `call(args)` that takes `OperationArgs`
and returns the result. `OperationArgs.from_mapping` builds arguments from
decoded JSON and raises `ValueError` for missing, non-integer or
out-of-range operands; `call` raises `MathError` when the result does not fit
in a signed 32-bit integer.

## What it does not do

The package does not include a client for a chat or language-model service:
the arithmetic tools are only defined here, and nothing in the package hands
them to an agent or prompts one.