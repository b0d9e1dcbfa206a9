[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "workerkit"
version = "0.1.0"
description = "Small threading building blocks: a restartable worker thread, a task-queue thread, a periodic timer and an observer subject."
requires-python = ">=3.10"
dependencies = []
keywords = ["threading", "worker", "task queue", "timer", "observer"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["workerkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
