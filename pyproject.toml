[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pointscope"
version = "0.1.0"
description = "Average measurement files per point and draw them as concentric circles in SVG"
requires-python = ">=3.10"
dependencies = []
keywords = ["measurements", "averaging", "visualization", "svg", "circles"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pointscope = "pointscope.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pointscope"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
