[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dadops"
version = "0.1.0"
description = "Dad-joke command line tool with a small HTTP server, MongoDB seeding and a few small utility modules"
requires-python = ">=3.10"
keywords = ["dadjoke", "cli", "http", "wsgi", "mongodb"]
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
    "Topic :: Utilities",
]
dependencies = [
    "requests",
    "pymongo",
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
dadops = "dadops.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dadops"]

[tool.pytest.ini_options]
addopts = "-ra"
