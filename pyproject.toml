[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algopad"
version = "0.1.0"
description = "Classic algorithm and data-structure exercises as plain Python functions: arrays, strings, bits, linked lists, trees and dynamic programming."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data-structures", "dynamic-programming", "exercises", "education"]
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["algopad"]

[tool.pytest.ini_options]
addopts = "-ra"
