[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "combivec"
version = "0.1.0"
description = "Combinatorics on 16-entry byte vectors: sorting networks, permutations, reductions and descent statistics"
requires-python = ">=3.10"
dependencies = []
keywords = ["combinatorics", "permutations", "sorting networks", "transformations", "descents"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
combivec-sort-bench = "combivec.sorting:main"
combivec-descents = "combivec.descents:main"

[tool.hatch.build.targets.wheel]
packages = ["combivec"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
