[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ooxlsx"
version = "0.1.0"
description = "Building blocks for Office Open XML spreadsheet parts: cell references, ranges, colours, formulas and chart XML."
requires-python = ">=3.10"
dependencies = []
keywords = ["xlsx", "ooxml", "spreadsheet", "chart", "drawingml", "xml"]
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
    "Topic :: Office/Business :: Financial :: Spreadsheet",
    "Topic :: Text Processing :: Markup :: XML",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ooxlsx"]

[tool.pytest.ini_options]
addopts = "-ra"
