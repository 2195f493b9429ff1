[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shapedraw"
version = "0.1.0"
description = "A small vector drawing model: rectangles, circles and ellipses with colour, undo history, a colour palette and a binary shape file format."
requires-python = ">=3.10"
dependencies = []
keywords = ["drawing", "shapes", "vector", "undo", "palette", "editor"]
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
    "Topic :: Multimedia :: Graphics :: Editors :: Vector-Based",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
shapedraw = "shapedraw.app:main"

[tool.hatch.build.targets.wheel]
packages = ["shapedraw"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
