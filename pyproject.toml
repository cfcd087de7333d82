[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "marchcubes"
version = "0.1.1"
description = "The Marching Cubes algorithm for creating isosurfaces from volume data"
requires-python = ">=3.10"
dependencies = []
keywords = ["marching-cubes", "isosurface", "mesh", "electron-density", "volume"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["marchcubes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
