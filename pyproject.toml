[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ppctasks"
version = "0.1.0"
description = "Staged computational tasks with order checking, timing and reference reductions"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "parallel programming",
    "reduction",
    "task pipeline",
    "benchmark",
    "numerical integration",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ppctasks"]

[tool.pytest.ini_options]
addopts = "-ra"
