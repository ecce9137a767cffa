[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "marais"
version = "0.1.0"
description = "A small turn-based terminal role-playing game on a fog-covered island board"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "rpg", "terminal", "dice", "roguelike"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: French",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
marais = "marais.game:main"

[tool.hatch.build.targets.wheel]
packages = ["marais"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
