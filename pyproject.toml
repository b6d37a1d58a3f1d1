[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "illogic"
version = "0.1.0"
description = "A small staged digital logic network simulator with gates, inputs and sensors"
requires-python = ">=3.10"
dependencies = []
keywords = ["logic", "simulator", "gates", "digital", "circuit", "latch"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
illogic = "illogic.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["illogic"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
