[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lfukit"
version = "0.1.0"
description = "TinyLFU admission policy, count-min sketch, Bloom filter and sampled LFU building blocks for caches"
requires-python = ">=3.10"
dependencies = []
keywords = ["cache", "lfu", "tinylfu", "count-min-sketch", "bloom-filter", "admission-policy"]
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
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lfukit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
