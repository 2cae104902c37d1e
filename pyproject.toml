[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "accent"
version = "0.0.0"
description = "Color space abstraction: colors bound to color models and color spaces"
requires-python = ">=3.10"
dependencies = []
keywords = ["color", "colour", "srgb", "linear-rgb", "display-p3", "color-space", "graphics"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["accent"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
