[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skyplace"
version = "0.1.0"
description = "Fundamental astrometry: calendars, geodetic coordinates, refraction and quick star-place transformations"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "astronomy",
    "astrometry",
    "julian date",
    "besselian epoch",
    "refraction",
    "geodetic",
    "aberration",
    "light deflection",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Astronomy",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["skyplace"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
