[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "snakeboard"
version = "0.1.0"
description = "A text-board snake game engine: load, step and save snake boards, or play interactively in a terminal."
requires-python = ">=3.10"
dependencies = []
keywords = ["snake", "game", "board", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
snakeboard = "snakeboard.cli:main"
snakeboard-interactive = "snakeboard.interactive:main"

[tool.hatch.build.targets.wheel]
packages = ["snakeboard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
