[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clappie"
version = "0.1.0"
description = "Personal assistant framework core: plain-text file store with metadata blocks, chores, themes and a view-stack display model"
requires-python = ">=3.10"
dependencies = [
    "wcwidth",
]
keywords = ["assistant", "terminal", "file-store", "chores", "tui", "ansi"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["clappie"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
