[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "microprints"
version = "0.1.0"
description = "Vowel and consonant-cluster profiles of text, with string, CSV and tree helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["linguistics", "text", "profile", "vowels", "graph", "csv", "binary-search-tree"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["microprints"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
