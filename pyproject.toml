[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fugelc"
version = "0.1.0"
description = "Fuzzy inference building blocks: Coco membership functions, AND operator, defuzzification and genome-encoded fuzzy rules"
requires-python = ">=3.10"
dependencies = []
keywords = ["fuzzy logic", "fuzzy systems", "genetic algorithms", "genome", "defuzzification"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fugelc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
