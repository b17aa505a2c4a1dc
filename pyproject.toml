[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ats_game"
version = "0.1.0"
description = "A small real-time strategy prototype with box selection and interpolated unit movement"
requires-python = ">=3.10"
keywords = ["game", "rts", "strategy", "pygame", "interpolation", "selection"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Real Time Strategy",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ats-game = "ats_game.app:main"

[tool.hatch.build.targets.wheel]
packages = ["ats_game"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
