[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fdf"
version = "0.1.0"
description = "Wireframe viewer for height maps with rotation, zoom and isometric projection"
requires-python = ">=3.10"
keywords = ["wireframe", "height map", "isometric", "projection", "xpm", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
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
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fdf = "fdf.app:main"

[tool.hatch.build.targets.wheel]
packages = ["fdf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
