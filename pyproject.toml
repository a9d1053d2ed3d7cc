[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "modpacktools"
version = "0.1.0"
description = "Helpers for managing Minecraft modpacks built from CurseForge and Modrinth files"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "minecraft",
    "modpack",
    "curseforge",
    "modrinth",
    "mrpack",
    "murmur2",
    "flexver",
]
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
    "Topic :: Games/Entertainment",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["modpacktools"]

[tool.hatch.build.targets.sdist]
include = ["modpacktools", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
