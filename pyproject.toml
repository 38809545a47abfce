[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "matrixcalc"
version = "1.0.0"
description = "A small matrix calculator: determinant, transpose, cofactors and inverse, with boxed console output."
requires-python = ">=3.10"
dependencies = []
keywords = ["matrix", "determinant", "inverse", "cofactor", "laplace", "linear-algebra"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
matrixcalc = "matrixcalc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["matrixcalc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
