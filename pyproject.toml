[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "circomstruct"
version = "2.1.5"
description = "Program structure for the circom circuit language: syntax tree, diagnostics, program archive and runtime memory helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["circom", "zero-knowledge", "compiler", "ast", "diagnostics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["circomstruct"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
