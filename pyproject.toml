[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "dpkit"
version = "0.1.0"
description = "Dynamic-programming solvers for classic counting, path, interval, string and knapsack problems"
requires-python = ">=3.10"
dependencies = []
keywords = ["dynamic programming", "combinatorics", "algorithms", "grids", "strings", "knapsack"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["dpkit*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
