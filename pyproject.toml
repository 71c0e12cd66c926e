[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yamlglow"
version = "0.5.0"
description = "Colour YAML piped to standard input for easier reading in the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["yaml", "highlight", "syntax", "terminal", "color", "ansi", "kubectl"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Filters",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
yamlglow = "yamlglow.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["yamlglow"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
