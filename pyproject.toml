[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "novakit"
version = "0.1.0"
description = "Utility toolkit: ordered collections, loose type conversion, little-endian codecs, digests and zlib helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["utilities", "collections", "conversion", "little-endian", "digest", "sm3", "zlib"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["novakit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
