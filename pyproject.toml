[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "repaddu"
version = "0.1.0"
description = "Repository analysis building blocks: symbol graphs, analysis views, tag extraction, token estimates, LSP symbol parsing and command-line option parsing."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "repository",
    "code analysis",
    "symbol graph",
    "lsp",
    "todo",
    "tags",
    "tokens",
]
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
    "Topic :: Software Development :: Quality Assurance",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["repaddu"]

[tool.hatch.build.targets.sdist]
include = ["repaddu", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
