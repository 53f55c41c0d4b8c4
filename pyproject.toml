[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lumaprism"
version = "0.0.1"
description = "A PrismLauncher storage analyzer and safe cleanup command-line tool"
requires-python = ">=3.10"
keywords = ["prismlauncher", "minecraft", "cli", "cleanup", "storage", "disk-usage"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: English",
    "Natural Language :: Japanese",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
    "Topic :: Utilities",
]
dependencies = [
    "platformdirs",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
luma = "lumaprism.app:main"

[tool.hatch.build.targets.wheel]
packages = ["lumaprism"]

[tool.pytest.ini_options]
addopts = "-ra"
