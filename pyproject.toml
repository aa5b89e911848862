[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "freud"
version = "1.0.1"
description = "freud is an image analyst: inspect dimensions, pixels and colour statistics of images"
requires-python = ">=3.10"
keywords = ["image", "pixel", "analysis", "statistics", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Processing",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pillow",
]

[project.scripts]
freud = "freud.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["freud"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
