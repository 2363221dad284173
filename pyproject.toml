[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "evilpikmin"
version = "0.0.1"
description = "A small real-time strategy sandbox where little guys scavenge scrap and build towers, driven by an entity-component-system engine."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "ecs", "entity-component-system", "strategy", "pygame"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Real Time Strategy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
evilpikmin = "evilpikmin.engine:main"

[tool.hatch.build.targets.wheel]
packages = ["evilpikmin"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
