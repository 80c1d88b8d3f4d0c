[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "draughtsboard"
version = "0.1.0"
description = "An 8x8 draughts (checkers) game with forced captures, flying queens and a computer opponent."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["checkers", "draughts", "board game", "pygame", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
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
test = [
    "pytest",
]

[project.scripts]
draughtsboard = "draughtsboard.app:main"

[tool.hatch.build.targets.wheel]
packages = ["draughtsboard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
