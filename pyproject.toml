[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "edgeboot"
version = "0.1.0"
description = "Service bootstrap building blocks: a lazy, thread-safe dependency-injection container and typed service configuration records."
requires-python = ">=3.10"
dependencies = []
keywords = ["dependency-injection", "configuration", "bootstrap", "microservices", "iot"]
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
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["edgeboot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
