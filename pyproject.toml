[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rclf"
version = "0.1.0"
description = "Reader, syntax checker and printer for RCLF column/key/value documents"
requires-python = ">=3.10"
dependencies = []
keywords = ["rclf", "parser", "file-format", "syntax-check", "columns"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: File Formats",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rclf = "rclf.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rclf"]

[tool.pytest.ini_options]
addopts = "-ra"
