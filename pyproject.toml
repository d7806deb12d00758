[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "affinemath"
version = "0.1.0"
description = "3D vectors and 4x4 matrices for affine transformations in row-vector convention"
requires-python = ">=3.10"
dependencies = []
keywords = ["matrix", "vector", "affine", "transform", "3d", "linear-algebra"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
affinemath = "affinemath.app:main"

[tool.hatch.build.targets.wheel]
packages = ["affinemath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
