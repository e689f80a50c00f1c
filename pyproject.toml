[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "corbusier"
version = "0.1.0"
description = "Canonical message model, validation and schema versioning for orchestrating AI agent conversations"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "ai-agents",
    "orchestration",
    "conversation",
    "messages",
    "validation",
    "event-sourcing",
    "schema-migration",
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
corbusier = "corbusier.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["corbusier"]

[tool.hatch.build.targets.sdist]
include = ["corbusier", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP", "SIM"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
