[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "planetgen"
version = "0.1.0"
description = "Procedural planet meshes: subdivided icospheres shaped by simplex noise and coloured by climate biomes"
requires-python = ">=3.10"
dependencies = []
keywords = ["procedural", "planet", "icosphere", "simplex noise", "mesh", "biome"]
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
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
planetgen = "planetgen.example:main"

[tool.hatch.build.targets.wheel]
packages = ["planetgen"]

[tool.pytest.ini_options]
addopts = "-ra"
