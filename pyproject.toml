[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tilebrush"
version = "2.0.0b0"
description = "Building blocks for tile-based painting: dab masks, per-tile operation queues, symmetry transforms and a surface interface"
requires-python = ">=3.10"
dependencies = []
keywords = ["painting", "brush", "dab", "tiles", "symmetry", "raster", "mask"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tilebrush"]

[tool.pytest.ini_options]
addopts = "-ra"
