[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "dsakit"
version = "0.1.0"
description = "Classic data-structure and algorithm routines: linked lists, binary trees, BSTs, DAG shortest paths and more"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data structures", "linked list", "binary tree", "bst", "graph"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["dsakit*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
