[build-system]
requires = ["setuptools>=61", "wheel"]
build-backend = "setuptools.build_meta"

[project]
name = "linqedin"
version = "0.1.0"
description = "A small professional-network manager with tiered accounts, profiles, follow networks and XML storage"
requires-python = ">=3.10"
dependencies = []
keywords = ["professional network", "profiles", "contacts", "search", "xml"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
linqedin = "linqedin.cli:main"

[tool.setuptools]
packages = ["linqedin"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
