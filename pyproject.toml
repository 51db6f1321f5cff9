[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ftpp"
version = "0.1.0"
description = "Toolbox of data structures, design patterns, vector maths, noise, threading helpers and a small framed-message TCP layer"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-buffer",
    "object-pool",
    "memento",
    "observer",
    "singleton",
    "state-machine",
    "vector",
    "perlin-noise",
    "mersenne-twister",
    "worker-pool",
    "tcp",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ftpp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
