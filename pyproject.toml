[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ponsic"
version = "0.1.0"
description = "RGB colours with HSV/HSL conversion, point/size/rect geometry, and translation of raw window messages into event objects"
requires-python = ">=3.10"
dependencies = []
keywords = ["color", "hsv", "hsl", "geometry", "rect", "events", "window messages"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ponsic"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
