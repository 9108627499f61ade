[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cexfeeds"
version = "0.1.0"
description = "Trading pairs, websocket subscriptions and message/REST payload parsing for Coinbase and KuCoin market data"
requires-python = ">=3.10"
keywords = ["crypto", "exchange", "websocket", "market-data", "coinbase", "kucoin", "trades", "quotes"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Typing :: Typed",
    "Topic :: Office/Business :: Financial :: Investment",
]
dependencies = [
    "python-dateutil",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["cexfeeds"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 110
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
