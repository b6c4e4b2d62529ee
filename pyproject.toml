[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "redblack"
version = "0.1.0"
description = "A red-black tree of comparable keys with duplicates, ordered iteration and node-based erase"
requires-python = ">=3.10"
dependencies = []
keywords = ["red-black tree", "balanced tree", "binary search tree", "data structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["redblack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
