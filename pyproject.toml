[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "edi810reader"
version = "0.1.0"
description = "Read ANSI X12 EDI 810 invoices and render them as human-readable reports."
requires-python = ">=3.10"
dependencies = []
keywords = ["edi", "x12", "810", "invoice", "parser", "accounting"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Financial and Insurance Industry",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Accounting",
    "Topic :: File Formats",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
edi810reader = "edi810reader.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["edi810reader"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
