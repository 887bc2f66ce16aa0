[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ykengine"
version = "0.1.0"
description = "Game engine utilities: vector and matrix math, collision tests, interpolation, tunable variables, scenes and colliders"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "game",
    "engine",
    "math",
    "collision",
    "vector",
    "matrix",
    "quaternion",
    "interpolation",
    "scene",
]
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
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ykengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
