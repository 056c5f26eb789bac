[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rubydung"
version = "0.0.1"
description = "Building blocks for a small voxel sandbox game: collision boxes, frustum culling, camera, layers, input, logging, shaders, textures and an OpenGL main loop"
requires-python = ">=3.10"
keywords = ["voxel", "game", "sandbox", "opengl", "blocks", "aabb", "frustum"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "numpy",
    "pyglet",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["rubydung"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
