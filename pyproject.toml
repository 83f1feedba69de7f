[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "marisakit"
version = "0.4.0"
description = "Building blocks for a static, space-efficient MARISA trie: configuration, binary I/O, construction caches and depth-based string sorting"
requires-python = ">=3.10"
dependencies = []
keywords = ["trie", "marisa", "data-structure", "sorting", "binary-io"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["marisakit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
