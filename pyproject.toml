[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iterkit"
version = "0.1.0"
description = "Iterator tools: grouping maps, intersperse, k-way merge, k-smallest selection and lazy buffers"
requires-python = ">=3.10"
dependencies = []
keywords = ["iterator", "itertools", "merge", "grouping", "heap", "fold"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["iterkit"]

[tool.pytest.ini_options]
addopts = "-ra"
