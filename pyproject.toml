[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "monthcards"
version = "0.1.0"
description = "A two-player card table of forty-eight cards in twelve month colours, shown in a pygame window."
requires-python = ">=3.10"
keywords = ["card game", "cards", "pygame", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
monthcards = "monthcards.app:main"

[tool.hatch.build.targets.wheel]
packages = ["monthcards"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
