[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "contestsolvers"
version = "0.1.0"
description = "Solutions to classic competitive-programming exercises as a small Python library and command."
requires-python = ">=3.10"
dependencies = []
keywords = ["competitive-programming", "algorithms", "exercises", "puzzles"]
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

[project.scripts]
contestsolvers = "contestsolvers.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["contestsolvers"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
