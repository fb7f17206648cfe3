[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trackodom"
version = "0.1.0"
description = "Vehicle odometry from GPS fixes and speed/steering readings, with lap sector timing"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "odometry",
    "gps",
    "enu",
    "ecef",
    "bicycle-model",
    "kinematics",
    "lap-timing",
    "sector-times",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
trackodom = "trackodom.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["trackodom"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
