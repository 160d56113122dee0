[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spectralpde"
version = "0.1.0"
description = "Real-to-real sine and cosine transforms (DST/DCT) and grid helpers for spectral Poisson-type solvers"
requires-python = ">=3.10"
keywords = ["dst", "dct", "fft", "spectral", "poisson", "pde", "transform"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
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
]

[project.optional-dependencies]
test = [
    "pytest",
    "numpy",
]

[tool.hatch.build.targets.wheel]
packages = ["spectralpde"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
