[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lc3vm"
version = "1.0.0"
description = "A virtual machine for the LC-3 educational computer architecture"
requires-python = ">=3.10"
dependencies = []
keywords = ["lc3", "lc-3", "virtual machine", "emulator", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lc3vm = "lc3vm.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["lc3vm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
