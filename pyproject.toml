[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "drillbook"
version = "0.1.0"
description = "Solutions to short algorithmic exercises: sorting, subarray sums, bit tricks and small puzzles"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "sorting", "bit manipulation", "puzzles", "exercises"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
drillbook = "drillbook.cli:main"

[tool.setuptools.packages.find]
include = ["drillbook*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
