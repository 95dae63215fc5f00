[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chronoquest"
version = "0.1.0"
description = "World state, asset catalogue and wall collisions of a small two-hero top-down role-playing game"
requires-python = ">=3.10"
dependencies = []
keywords = ["rpg", "game", "collision", "tile-map", "sprites"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["chronoquest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
