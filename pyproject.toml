[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termpaint"
version = "0.1.0"
description = "Draw pictures with the mouse in the terminal and save them as text"
requires-python = ">=3.10"
keywords = ["terminal", "drawing", "ascii-art", "paint", "tui"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
]
dependencies = [
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
termpaint = "termpaint.app:main"

[tool.hatch.build.targets.wheel]
packages = ["termpaint"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
