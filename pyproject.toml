[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "starforge"
version = "0.1.0"
description = "A small entity-component-system game engine core with geometry primitives and lobby bookkeeping for multiplayer arcade games"
requires-python = ">=3.10"
dependencies = []
keywords = ["ecs", "entity-component-system", "game-engine", "lobby", "shoot-em-up", "arcade"]
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
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["starforge"]

[tool.hatch.build.targets.sdist]
include = ["starforge", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
