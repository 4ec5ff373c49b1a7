[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "voxelcraft"
version = "0.1.0"
description = "A small voxel world model: blocks, chunks, vectors, player movement and visible-face rendering"
requires-python = ">=3.10"
dependencies = []
keywords = ["voxel", "chunk", "blocks", "game", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["voxelcraft"]

[tool.pytest.ini_options]
addopts = "-ra"
