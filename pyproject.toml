[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drycore"
version = "0.1.0"
description = "Domain types, config tables and the normalizer port for a structural duplication detector."
requires-python = ">=3.11"
dependencies = []
keywords = ["dry", "duplication", "clone-detection", "static-analysis", "jaccard"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Quality Assurance",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["drycore"]

[tool.pytest.ini_options]
addopts = "-ra"
