[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "portwatch"
version = "0.1.0"
description = "Building blocks for watching TCP ports: probing, state tracking, alert suppression and status reporting"
requires-python = ">=3.10"
dependencies = []
keywords = ["monitoring", "tcp", "ports", "alerting", "rate-limit", "healthcheck"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["portwatch"]

[tool.pytest.ini_options]
addopts = "-ra"
