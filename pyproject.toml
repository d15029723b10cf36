[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "ferrocore"
version = "0.1.0"
description = "Core building blocks for a text editor: key codes and keymaps, indentation detection, language detection from file names, background jobs and git branch watching."
requires-python = ">=3.10"
dependencies = [
    "watchdog",
]
keywords = ["editor", "keymap", "indentation", "git", "jobs"]
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
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.setuptools.packages.find]
include = ["ferrocore*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
