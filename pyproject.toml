[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cleanout"
version = "0.1.0"
description = "A command-line tool that removes temp and cache files older than a given age"
requires-python = ">=3.10"
dependencies = []
keywords = ["cleanup", "temp", "cache", "files", "cli", "disk"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cleanout = "cleanout.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cleanout"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
