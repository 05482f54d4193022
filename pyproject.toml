[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lantern"
version = "0.1.0"
description = "Reader and disassembler for Luau bytecode (version 6)"
requires-python = ">=3.10"
dependencies = []
keywords = ["luau", "lua", "bytecode", "disassembler"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Software Development :: Disassemblers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lantern = "lantern.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["lantern"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
