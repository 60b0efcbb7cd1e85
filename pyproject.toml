[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "featurekit"
version = "0.1.0"
description = "Building blocks for feature-oriented end-to-end tests: features, steps, step filters, flags and environment configuration"
requires-python = ">=3.10"
dependencies = []
keywords = ["testing", "e2e", "features", "assessments", "test-framework"]
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
    "Topic :: Software Development :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["featurekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
