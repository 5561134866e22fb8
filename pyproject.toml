[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "userindexbench"
version = "0.1.0"
description = "Benchmark of closed hashing, open hashing and binary search trees for indexing user records"
requires-python = ">=3.10"
dependencies = []
keywords = ["benchmark", "hash table", "murmurhash", "binary search tree", "data structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
userindexbench = "userindexbench.experiment:main"

[tool.setuptools.packages.find]
include = ["userindexbench*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
