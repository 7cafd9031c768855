[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mandelscope"
version = "0.1.0"
description = "Interactive Mandelbrot set explorer with pan and zoom"
requires-python = ">=3.10"
keywords = ["mandelbrot", "fractal", "visualization", "pygame", "numpy"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
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
mandelscope = "mandelscope.app:main"

[tool.hatch.build.targets.wheel]
packages = ["mandelscope"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
