[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "desafios"
version = "0.1.0"
description = "Small puzzles and contest problems: the knight's corner circuit, a Nim advisor and programming contest solutions."
requires-python = ">=3.10"
dependencies = []
keywords = ["knight", "chess", "nim", "puzzles", "competitive-programming", "algorithms"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
desafios-knight = "desafios.knight:main"
desafios-nim = "desafios.nim:main"
desafios-contest = "desafios.contest:main"

[tool.hatch.build.targets.wheel]
packages = ["desafios"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
