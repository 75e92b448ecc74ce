[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "azamcodec"
version = "0.1.5"
description = "Encoder and decoder for Azam Codec, a lexicographically sortable multi-section base16 encoding"
requires-python = ">=3.10"
dependencies = []
keywords = ["azam", "identifier", "sortable", "encoding", "base16"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["azamcodec"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
