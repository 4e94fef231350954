[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "symtab"
version = "0.1.0"
description = "A scoped symbol table for a small C-like compiler front end"
requires-python = ">=3.10"
dependencies = []
keywords = ["symbol table", "compiler", "scope", "identifiers"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["symtab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
