[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ezatheme"
version = "0.1.0"
description = "Terminal colour themes, LS_COLORS parsing, tree drawing, timestamp formatting and table layout for file listings"
requires-python = ">=3.10"
dependencies = [
    "wcwidth",
]
keywords = ["ls", "ls_colors", "ansi", "terminal", "theme", "colours", "tree", "table"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Terminals",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ezatheme"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
