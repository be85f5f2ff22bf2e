[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "exkit"
version = "0.1.0"
description = "Everyday helpers for strings, bytes, UTF-8 slicing, padding, buffer pools, data logs, IP addresses and atomic floats"
requires-python = ">=3.10"
dependencies = []
keywords = ["strings", "bytes", "utf-8", "padding", "ip", "atomic", "datalog", "pool"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["exkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
