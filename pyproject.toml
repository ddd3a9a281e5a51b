[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rgsskit"
version = "0.1.0"
description = "Game-engine data types and input state tracking: rectangles, tones, tile tables and frame-based keyboard, joypad and mouse input."
requires-python = ">=3.10"
dependencies = []
keywords = ["rgss", "game", "engine", "tilemap", "input", "table"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rgsskit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
