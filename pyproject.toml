[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "funkit"
version = "0.1.0"
description = "Functional helpers for collections: emptiness checks, compacting, filling, keys and values, joins, set differences and path assignment."
requires-python = ">=3.10"
dependencies = []
keywords = ["functional", "collections", "utilities", "join", "intersection", "compact"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["funkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
