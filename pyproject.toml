[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mandelscope"
version = "0.1.0"
description = "Mandelbrot set escape-time engines with ASCII and windowed viewers"
requires-python = ">=3.10"
keywords = ["mandelbrot", "fractal", "escape-time", "benchmark"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "numpy",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mandelscope = "mandelscope.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mandelscope"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
