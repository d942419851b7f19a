[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "dominionsim"
version = "0.1.0"
description = "A deck-building card game engine with a seeded random generator, a scripted simulation, an interactive console player and bots"
requires-python = ">=3.10"
dependencies = []
keywords = ["dominion", "card game", "deck building", "simulation", "lehmer rng"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
dominion-playdom = "dominionsim.playdom:main"
dominion-player = "dominionsim.player:main"
dominion-seedsearch = "dominionsim.seedsearch:main"

[tool.setuptools.packages.find]
include = ["dominionsim*"]

[tool.pytest.ini_options]
addopts = "-ra"
