[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gammondb"
version = "1.0.0"
description = "Backgammon game records, puzzles and their SQLite storage"
requires-python = ">=3.10"
dependencies = []
keywords = ["backgammon", "board-game", "puzzles", "sqlite"]
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
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gammondb"]

[tool.pytest.ini_options]
addopts = "-ra"
