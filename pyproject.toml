[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "argusui"
version = "0.1.0"
description = "Terminal rendering components for tracking coding-agent tasks: task and project lists, status bar, detail panel and diff views"
requires-python = ">=3.10"
dependencies = [
    "wcwidth",
]
keywords = ["terminal", "tui", "ansi", "diff", "tasks", "git", "worktree"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Terminals",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["argusui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
