[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yasl"
version = "0.11.8"
description = "Runtime core of a small scripting language: value stack, embedding state and standard libraries"
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "scripting", "embedding", "stack", "standard library"]
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
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["yasl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
