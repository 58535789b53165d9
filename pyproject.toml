[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "transport_catalogue"
version = "1.0.0"
description = "Transport catalogue: bus routes, stop statistics, SVG route maps and fastest-journey routing driven by JSON requests"
requires-python = ">=3.10"
dependencies = []
keywords = ["transport", "bus", "routing", "svg", "json", "catalogue", "map"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
transport-catalogue = "transport_catalogue.main:main"

[tool.hatch.build.targets.wheel]
packages = ["transport_catalogue"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
