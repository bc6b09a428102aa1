[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flatpack"
version = "0.1.0"
description = "Game-world model for a side-scrolling action game: entities, collisions, camera, binary level files and a level editor core"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "side-scroller", "level-editor", "collision", "camera", "sprites"]
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
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["flatpack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
