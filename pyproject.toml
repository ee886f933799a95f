[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "barchartrace"
version = "1.0.0"
description = "Animated bar chart races rendered in the terminal from a plain text data file"
requires-python = ">=3.10"
dependencies = []
keywords = ["bar chart", "race", "animation", "terminal", "visualization", "ansi"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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
bcr = "barchartrace.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["barchartrace"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
