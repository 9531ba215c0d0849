[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adventpuzzles"
version = "0.1.0"
description = "Solutions to daily programming puzzles, each a small module with part1 and part2 functions."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "algorithms", "challenges"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["adventpuzzles"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
