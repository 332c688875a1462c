[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glscene"
version = "0.1.0"
description = "Scene-side building blocks for small real-time 3D apps: vectors, planes, frustum culling, hex grids, menus and meshes"
requires-python = ">=3.10"
dependencies = []
keywords = ["3d", "frustum", "culling", "hexgrid", "menu", "binary-tree", "geometry", "mesh"]
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
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["glscene"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
