[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "openrm"
version = "1.0.0"
description = "Coordinate transforms, Kalman filters, target motion models and serial utilities for robot aiming"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["kalman", "ekf", "robotics", "transforms", "tracking", "serial", "ballistics"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: POSIX :: Linux",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["openrm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
