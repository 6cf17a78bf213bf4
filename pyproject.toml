[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "consoleview"
version = "0.1.0"
description = "Text building blocks for an async task console: duration styling, tables, controls, task warnings and mini histograms"
requires-python = ">=3.10"
dependencies = []
keywords = ["console", "async", "tasks", "diagnostics", "terminal", "histogram"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Debuggers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
consoleview-dev = "consoleview.docs_images:main"

[tool.hatch.build.targets.wheel]
packages = ["consoleview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
