[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "silksong"
version = "0.1.0"
description = "A small musical puzzle game: place notes and activators, then let growing circles play them."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "music", "puzzle", "pygame", "scale", "notes"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Multimedia :: Sound/Audio",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
silksong = "silksong.app:main"

[tool.hatch.build.targets.wheel]
packages = ["silksong"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
