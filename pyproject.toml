[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eulerkit"
version = "0.1.0"
description = "Solvers for number-theory, combinatorics and puzzle problems, with reusable helpers for primes, poker hands, Roman numerals and more."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "mathematics",
    "number-theory",
    "primes",
    "combinatorics",
    "puzzles",
    "poker",
    "roman-numerals",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
euler-051 = "eulerkit.problem051:main"
euler-052 = "eulerkit.problem052:main"
euler-053 = "eulerkit.problem053:main"
euler-054 = "eulerkit.poker:main"
euler-054-report = "eulerkit.poker_report:main"
euler-055 = "eulerkit.problem055:main"
euler-056 = "eulerkit.problem056:main"
euler-057 = "eulerkit.problem057:main"
euler-058 = "eulerkit.problem058:main"
euler-059 = "eulerkit.problem059:main"
euler-060 = "eulerkit.problem060:main"
euler-061 = "eulerkit.problem061:main"
euler-067 = "eulerkit.problem067:main"
euler-068 = "eulerkit.problem068:main"
euler-069 = "eulerkit.problem069:main"
euler-071 = "eulerkit.problem071:main"
euler-073 = "eulerkit.problem073:main"
euler-074 = "eulerkit.problem074:main"
euler-076 = "eulerkit.problem076:main"
euler-080 = "eulerkit.problem080:main"
euler-089 = "eulerkit.problem089:main"
euler-090 = "eulerkit.problem090:main"
euler-097 = "eulerkit.problem097:main"
euler-099 = "eulerkit.problem099:main"

[tool.hatch.build.targets.wheel]
packages = ["eulerkit"]

[tool.hatch.build.targets.sdist]
include = ["eulerkit", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP", "SIM"]

[tool.mypy]
python_version = "3.10"
files = ["eulerkit"]
