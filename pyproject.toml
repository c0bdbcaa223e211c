[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stellopay"
version = "0.1.0"
description = "An in-memory payroll escrow ledger with employer-controlled salaries, payment intervals, pausing and ownership transfer"
requires-python = ">=3.10"
dependencies = []
keywords = ["payroll", "escrow", "salary", "ledger", "accounting"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["stellopay"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
