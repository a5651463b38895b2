[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "plonkup"
version = "0.1.0"
description = "Permutation and lookup arguments for PLONK-style proof systems over the BLS12-381 scalar field"
requires-python = ">=3.10"
dependencies = []
keywords = ["plonk", "plonkup", "zero-knowledge", "lookup", "permutation", "bls12-381"]
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
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["plonkup"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
