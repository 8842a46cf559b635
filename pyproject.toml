[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cielcontainers"
version = "0.1.0"
description = "Fixed-capacity and growable vectors, a reference-counting control block and observer pointers"
requires-python = ">=3.10"
dependencies = []
keywords = ["containers", "vector", "inplace-vector", "reference-counting", "observer-ptr"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cielcontainers"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
