[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rengine"
version = "0.1.0"
description = "The core of a small 2D game engine: vectors, transformations, scene objects, components, collision checks and key events."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "engine", "2d", "physics", "collision", "vector", "scene"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
