[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trisgame"
version = "0.1.0"
description = "Two-player tic-tac-toe (tris) in a pygame window, played from the number keys"
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["tic-tac-toe", "tris", "game", "pygame", "board game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
trisgame = "trisgame.app:main"

[tool.hatch.build.targets.wheel]
packages = ["trisgame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
