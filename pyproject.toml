[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "netspan"
version = "0.1.0"
description = "Build a computer network, find its minimum spanning tree with Prim's algorithm, and trace paths through the tree"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "minimum spanning tree", "prim", "network", "path"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
netspan = "netspan.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["netspan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
