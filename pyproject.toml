[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shipprompt"
version = "0.1.0"
description = "Building blocks for an informative shell prompt: tool versions, git state, paths, timing and environment details."
requires-python = ">=3.11"
keywords = ["prompt", "shell", "git", "terminal", "toolchain"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]
dependencies = [
    "pyyaml",
    "regex",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["shipprompt"]

[tool.pytest.ini_options]
addopts = "-ra"
