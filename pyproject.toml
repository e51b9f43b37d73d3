[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rsvn"
version = "0.0.1"
description = "A terminal user interface for Subversion working copies"
requires-python = ">=3.10"
dependencies = []
keywords = ["svn", "subversion", "tui", "terminal", "curses", "version-control"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Version Control",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rsvn = "rsvn.app:main"

[tool.hatch.build.targets.wheel]
packages = ["rsvn"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
