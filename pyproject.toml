[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "casperkit"
version = "1.0.0"
description = "Client library for Casper network nodes: CL types, byte codecs, global state keys and typed JSON-RPC results"
requires-python = ">=3.10"
dependencies = []
keywords = ["casper", "blockchain", "json-rpc", "cltype", "serialization"]
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
packages = ["casperkit"]

[tool.pytest.ini_options]
addopts = "-ra"
