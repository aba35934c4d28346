[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "logfour"
version = "1.6.0"
description = "Building blocks for log4j-style logging: structured error records, property files, time stamp formatting and appender collections."
requires-python = ">=3.10"
dependencies = []
keywords = ["logging", "log4j", "properties", "configuration", "errors"]
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
    "Topic :: System :: Logging",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["logfour"]

[tool.pytest.ini_options]
addopts = "-ra"
