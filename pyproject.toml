[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "traffictrainer"
version = "0.1.0"
description = "Headless game logic for a driving trainer: game states, session flow, a simple car model, an on-foot player and menu helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["driving", "simulation", "vehicle", "game", "state-machine"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["traffictrainer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
