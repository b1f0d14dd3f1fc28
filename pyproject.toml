[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arraynet"
version = "0.1.0"
description = "Encode, decode, checksum and reassemble integer arrays carried in ArrayNet network packets"
requires-python = ">=3.10"
dependencies = []
keywords = ["packet", "network", "checksum", "serialization", "fragmentation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
arraynet = "arraynet.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["arraynet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
