[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pokersim"
version = "0.1.0"
description = "Monte Carlo Texas Hold'em simulator that records pre-flop hand odds and combination frequencies in SQLite"
requires-python = ">=3.10"
dependencies = []
keywords = ["poker", "texas-holdem", "monte-carlo", "simulation", "odds", "sqlite"]
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
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pokersim = "pokersim.simulator:main"

[tool.hatch.build.targets.wheel]
packages = ["pokersim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
