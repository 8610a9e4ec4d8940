[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "duelo"
version = "0.1.0"
description = "Turn-based team battle simulator between characters armed with attack and defence weapons"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "battle", "game", "teams", "turn-based"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Portuguese (Brazilian)",
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

[project.scripts]
duelo = "duelo.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["duelo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
