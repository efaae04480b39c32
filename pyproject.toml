[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shapesketch"
version = "0.1.0"
description = "A small interactive sketcher for dots, lines, rectangles, circles and arcs on a ground plane"
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["drawing", "sketch", "geometry", "shapes", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Vector-Based",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
shapesketch = "shapesketch.app:main"

[tool.hatch.build.targets.wheel]
packages = ["shapesketch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
