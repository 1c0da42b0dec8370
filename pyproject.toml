[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arbprobe"
version = "0.1.0"
description = "Check that cryptocurrency exchange WebSocket endpoints accept a connection before running arbitrage"
requires-python = ">=3.10"
dependencies = []
keywords = ["arbitrage", "websocket", "exchange", "crypto", "connectivity"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
arbprobe = "arbprobe.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["arbprobe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
