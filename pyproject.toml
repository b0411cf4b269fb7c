[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "craftorio"
version = "0.1.0"
description = "Voxel sandbox game model: chunked block world, calendar with seasons and lunar phases, day/night lighting, entities, menus and world saves"
requires-python = ">=3.10"
dependencies = []
keywords = ["voxel", "sandbox", "game", "simulation", "blocks", "calendar"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["craftorio"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
