[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mazearcade"
version = "1.0.0"
description = "A terminal maze game with seven built-in mini-games"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "maze",
    "terminal",
    "game",
    "snake",
    "sokoban",
    "hangman",
    "tic-tac-toe",
    "rock-paper-scissors",
    "text-adventure",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mazearcade = "mazearcade.app:main"

[tool.hatch.build.targets.wheel]
packages = ["mazearcade"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
