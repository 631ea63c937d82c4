[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nshkit"
version = "0.1.0"
description = "Shell runtime utilities: error codes, number parsing, path handling, logging configuration, hash maps and signal dispatch"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "utilities", "paths", "signals", "logging", "hashmap"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nshkit"]

[tool.pytest.ini_options]
addopts = "-ra"
