[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gamehandlers"
version = "0.1.0"
description = "Tick-driven handler framework for small pygame games: scenes, game objects, cameras, events, input and drawing."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["pygame", "game", "engine", "scenes", "handlers", "game-loop"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["gamehandlers"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
