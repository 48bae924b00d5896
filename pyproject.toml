[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "cavequest"
version = "0.1.0"
description = "A small turn-based text role-playing game: pick a hero, buy weapons, clear the cave and defeat the final boss."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "rpg", "text-adventure", "terminal", "turn-based"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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
cavequest = "cavequest.game:main"

[tool.setuptools.packages.find]
include = ["cavequest*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
