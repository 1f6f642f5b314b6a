[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ringfilter"
version = "0.1.0"
description = "Fixed-size float32 circular buffers and FIR filtering over them"
requires-python = ">=3.10"
dependencies = []
keywords = ["circular buffer", "ring buffer", "fir", "filter", "dsp", "signal processing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ringfilter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
