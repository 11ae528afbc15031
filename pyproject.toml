[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "noeagles"
version = "0.1.0"
description = "Import race result CSV files, pick their columns and link them to configured races"
requires-python = ">=3.10"
dependencies = []
keywords = ["csv", "race", "results", "import", "files", "shell"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
noeagles = "noeagles.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["noeagles"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
