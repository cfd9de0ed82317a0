[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "plonkwidgets"
version = "0.1.0"
description = "PLONK verifier building blocks: polynomial manifests, prover settings, public-input delta and widget arithmetic"
requires-python = ">=3.10"
dependencies = []
keywords = ["plonk", "zero-knowledge", "snark", "polynomial", "cryptography"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["plonkwidgets"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
