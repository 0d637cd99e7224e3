[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "puzzlekit"
version = "0.1.0"
description = "Solutions to classic algorithmic puzzles: candy distribution, digit tricks, string and array problems."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "puzzles", "interview", "data-structures", "union-find"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["puzzlekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
