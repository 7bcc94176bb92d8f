[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mapserve"
version = "0.1.0"
description = "Building blocks for a map tile and geolocation web service: search scoring, result formatting, routing, tile caching, SVG paths, labels and raster lookup"
requires-python = ">=3.10"
dependencies = []
keywords = ["map", "tiles", "svg", "geolocation", "mercator", "gzip", "labels"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["mapserve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
