[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tablecat"
version = "0.1.0"
description = "A desktop pet with frame animations and a small side-scrolling jump-and-run game"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["desktop pet", "animation", "game", "runner", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tablecat = "tablecat.pet:main"

[tool.hatch.build.targets.wheel]
packages = ["tablecat"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
