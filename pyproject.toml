[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "copas"
version = "0.1.0"
description = "A console shell game: register players, guess which cup hides the ball and bet on it."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "console", "shell game", "cups", "betting"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
copas = "copas.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["copas"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
