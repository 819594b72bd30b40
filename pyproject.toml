[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linkedstructs"
version = "0.1.0"
description = "Linked lists, dancing links (Algorithm X) and a Sudoku solver built on exact cover."
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "doubly linked list", "dancing links", "algorithm x", "exact cover", "sudoku"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["linkedstructs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
