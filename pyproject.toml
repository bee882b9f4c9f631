[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "limbint"
version = "0.1.0"
description = "Arbitrary-precision signed integers stored as base-10^9 limbs, with Karatsuba multiplication and long division"
requires-python = ">=3.10"
dependencies = []
keywords = ["bigint", "arbitrary precision", "karatsuba", "long division", "arithmetic"]
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
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
limbint-bench = "limbint.bench:main"

[tool.hatch.build.targets.wheel]
packages = ["limbint"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
