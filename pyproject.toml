[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hybridcrypt"
version = "0.1.0"
description = "Toy hybrid text cipher combining a digit-matrix cipher and a binary-tree cipher keyed by process id and clock time"
requires-python = ">=3.10"
dependencies = []
keywords = ["cipher", "encryption", "binary tree", "matrix", "toy cryptography"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
hybridcrypt = "hybridcrypt.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hybridcrypt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
