[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rsfec"
version = "0.1.0"
description = "Reed-Solomon forward error correction over GF(2^8) with erasure decoding and channel-noise simulation helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["reed-solomon", "fec", "error-correction", "galois-field", "bpsk", "ham-radio"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Telecommunications Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Ham Radio",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
rsfec-primitive-polys = "rsfec.primitive:main"

[tool.hatch.build.targets.wheel]
packages = ["rsfec"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
