[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "warzone"
version = "0.1.0"
description = "Orders, players and a phase-driven game engine for a Warzone-style turn-based strategy game"
requires-python = ">=3.10"
dependencies = []
keywords = ["warzone", "risk", "strategy", "game", "state-machine"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
warzone = "warzone.drivers:main"

[tool.hatch.build.targets.wheel]
packages = ["warzone"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
