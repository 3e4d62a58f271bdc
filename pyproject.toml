[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "brynetkit"
version = "0.1.0"
description = "Networking building blocks: fixed-capacity byte buffer, timer scheduling, TCP socket wrappers and a SHA-1 hasher"
requires-python = ">=3.10"
dependencies = []
keywords = ["networking", "tcp", "timer", "buffer", "sha1", "sockets"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["brynetkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
