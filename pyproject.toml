[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "navalbattle"
version = "1.0.0"
description = "Battleship board setup with ship placement and area-of-effect abilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["battleship", "board game", "naval battle", "terminal"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
navalbattle = "navalbattle.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["navalbattle"]

[tool.pytest.ini_options]
addopts = "-ra"
