[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crypto-scanner"
version = "0.1.0"
description = "Streams 24h market tickers, picks out strong gainers and broadcasts them to WebSocket clients."
requires-python = ">=3.10"
keywords = ["crypto", "scanner", "websocket", "ticker", "signals", "aiohttp"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: AsyncIO",
    "Framework :: aiohttp",
    "Intended Audience :: Financial and Insurance Industry",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "aiohttp>=3.9",
    "websockets>=12.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.4",
    "pytest-asyncio>=0.23",
]

[project.scripts]
crypto-scanner = "crypto_scanner.server:main"
crypto-scanner-parallelism = "crypto_scanner.util:main"

[tool.hatch.build.targets.wheel]
packages = ["crypto_scanner"]

[tool.hatch.build.targets.sdist]
include = ["crypto_scanner", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
