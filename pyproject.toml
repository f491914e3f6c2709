[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pinhole-tracer"
version = "0.1.0"
description = "A pinhole-camera path tracer that renders spheres, triangles and cuboids from INI scene files to BMP images."
requires-python = ">=3.10"
dependencies = []
keywords = ["raytracer", "path tracing", "rendering", "bmp", "3d", "graphics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pinhole-tracer = "pinhole_tracer.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pinhole_tracer"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
