[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "grace"
version = "1.0.0"
description = "Stability scoring, fitness ranking and parent selection for designing collagen triple-helix heterotrimers"
requires-python = ">=3.10"
dependencies = []
keywords = ["collagen", "triple helix", "genetic algorithm", "peptide design", "heterotrimer", "melting temperature"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["grace"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
