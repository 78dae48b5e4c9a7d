[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "projman"
version = "0.1.0"
description = "Terminal project manager: create, list, inspect and archive project folders, and generate tag IDs from CSV."
requires-python = ">=3.10"
keywords = ["projects", "project-management", "tui", "tagging", "archive", "yaml"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
    "Topic :: Utilities",
]
dependencies = [
    "pyyaml>=6.0",
    "python-dotenv>=1.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
projman = "projman.ui.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["projman"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
