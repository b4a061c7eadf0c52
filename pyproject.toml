[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "smartpayroll"
version = "0.1.0"
description = "A small staff, attendance and payroll manager backed by SQLite"
requires-python = ">=3.10"
dependencies = []
keywords = ["payroll", "attendance", "staff", "hr", "sqlite"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
smartpayroll = "smartpayroll.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["smartpayroll"]

[tool.pytest.ini_options]
addopts = "-ra"
