[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bezierbrush"
version = "0.1.0"
description = "Repaint a picture with many short, randomly shaped Bezier brush strokes"
requires-python = ">=3.10"
dependencies = [
    "numpy",
    "pillow",
]
keywords = ["bezier", "painting", "image", "brush", "stroke", "art", "filter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Artistic Software",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
bezierbrush = "bezierbrush.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bezierbrush"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
