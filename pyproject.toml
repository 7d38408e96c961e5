[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphsolve"
version = "0.1.0"
description = "Solvers for classic graph and tree problems: traversal, shortest paths, flows, components and tree queries."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "tree",
    "algorithms",
    "shortest-path",
    "max-flow",
    "strongly-connected-components",
    "eulerian-path",
    "union-find",
    "segment-tree",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["graphsolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
