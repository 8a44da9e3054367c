[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "filmotheque"
version = "0.1.0"
description = "Load a film collection from a binary file and books from a text file, then list them all."
requires-python = ">=3.10"
dependencies = []
keywords = ["films", "books", "collection", "catalogue", "binary-format"]
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
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
filmotheque = "filmotheque.cli:main"

[tool.setuptools.packages.find]
include = ["filmotheque*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
