[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iteradaptors"
version = "0.1.0"
description = "Lazy iterator adaptors and sources: peeking, merging, zipping, tuples, permutations and more"
requires-python = ">=3.10"
dependencies = []
keywords = ["iterator", "itertools", "adaptor", "generator", "permutations", "peek"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["iteradaptors"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
