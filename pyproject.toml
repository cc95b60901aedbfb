[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "prismtrace"
version = "0.1.0"
description = "A path-tracing renderer for JSON-described scenes of spheres, planes, triangles, cones, cylinders and OBJ meshes"
requires-python = ">=3.10"
keywords = ["raytracer", "path tracing", "rendering", "3d", "bvh", "obj"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "pillow",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
prismtrace = "prismtrace.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["prismtrace"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
