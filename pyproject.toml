[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "limbarith"
version = "0.4.6"
description = "Arbitrary-precision unsigned integers stored as little-endian 32-bit limbs, with borrow-propagating subtraction"
requires-python = ">=3.10"
dependencies = []
keywords = ["mathematics", "numerics", "bignum", "bigint", "arbitrary-precision", "limbs"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["limbarith"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
