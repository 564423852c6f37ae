[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gotkit"
version = "0.1.0"
description = "Small utilities: ranges, integer conversion, heaps, results, locks, random strings and a Stable Diffusion config and client."
requires-python = ">=3.10"
dependencies = []
keywords = ["heap", "range", "result", "strconv", "stable-diffusion", "utilities"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gotkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
