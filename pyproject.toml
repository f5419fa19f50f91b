[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scintsim"
version = "0.1.0"
description = "Photon path tracing in convex scintillator tiles, signal-plus-background spectrum fitting, and two small console tools"
requires-python = ">=3.10"
dependencies = [
    "numpy",
    "scipy",
]
keywords = [
    "scintillator",
    "ray tracing",
    "polyhedron",
    "geometry",
    "curve fitting",
    "simulation",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
scintsim-spectrum = "scintsim.spectrum:main"
scintsim-blackjack = "scintsim.blackjack:main"

[tool.hatch.build.targets.wheel]
packages = ["scintsim"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
