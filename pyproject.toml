[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "algosolve"
version = "0.1.0"
description = "Solutions to classic algorithm problems: trees, linked lists, heaps, sliding windows, greedy and counting puzzles."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data-structures", "heap", "binary-tree", "greedy", "sliding-window"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algosolve = "algosolve.cli:main"

[tool.setuptools.packages.find]
include = ["algosolve*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
