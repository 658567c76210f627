[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordsched"
version = "0.1.0"
description = "Backtracking solvers for Wordle-style word completion and worker shift scheduling"
requires-python = ">=3.10"
dependencies = []
keywords = ["wordle", "backtracking", "scheduling", "puzzle", "recursion"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
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
wordsched-wordle = "wordsched.wordle:main"
wordsched-schedule = "wordsched.schedwork:main"

[tool.hatch.build.targets.wheel]
packages = ["wordsched"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
