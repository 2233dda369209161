[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mfcommons"
version = "0.1.0"
description = "Small utilities: system errors, optionals, string helpers, file attributes and timezone queries."
requires-python = ">=3.10"
dependencies = []
keywords = ["optional", "errno", "strings", "timezone", "file-attributes", "utilities"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mfcommons"]

[tool.pytest.ini_options]
addopts = "-ra"
