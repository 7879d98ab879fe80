[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mckp"
version = "0.1.0"
description = "Brute-force solvers for the multiple-choice knapsack problem"
requires-python = ">=3.10"
dependencies = []
keywords = ["knapsack", "mckp", "optimization", "brute-force", "combinatorics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mckp = "mckp.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mckp"]

[tool.pytest.ini_options]
addopts = "-ra"
