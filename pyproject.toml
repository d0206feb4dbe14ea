[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "librarykeeper"
version = "0.1.0"
description = "A small in-memory library catalogue that tracks books, users and who has borrowed what."
requires-python = ">=3.10"
dependencies = []
keywords = ["library", "books", "lending", "catalogue", "borrowing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
librarykeeper = "librarykeeper.cli:main"
librarykeeper-log-demo = "librarykeeper.log:main"

[tool.hatch.build.targets.wheel]
packages = ["librarykeeper"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
