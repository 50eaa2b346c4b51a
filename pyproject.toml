[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "basickit"
version = "0.1.0"
description = "Small, dependency-free helpers for text patterns, number puzzles, list operations and string checks."
requires-python = ">=3.10"
dependencies = []
keywords = ["patterns", "arrays", "strings", "numbers", "exercises"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["basickit"]

[tool.pytest.ini_options]
addopts = "-ra"
