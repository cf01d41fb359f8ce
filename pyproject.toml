[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fractalview"
version = "0.1.0"
description = "Interactive Mandelbrot and Newton fractal viewer with click-to-zoom"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["fractal", "mandelbrot", "newton", "visualization", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
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

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fractalview = "fractalview.app:main"

[tool.hatch.build.targets.wheel]
packages = ["fractalview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
