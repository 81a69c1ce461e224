[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "patternkit"
version = "0.1.0"
description = "Search routines, lazy sequences and thread-based concurrency patterns: channels, fan-in/fan-out, futures, worker pools, rate limiting and scheduling."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "concurrency",
    "channels",
    "iterators",
    "generators",
    "pipeline",
    "fan-in",
    "fan-out",
    "worker-pool",
    "rate-limiter",
    "single-flight",
    "scheduler",
    "binary-search",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
patternkit-books = "patternkit.books:main"
patternkit-scheduler = "patternkit.scheduler:main"

[tool.setuptools.packages.find]
include = ["patternkit*"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
