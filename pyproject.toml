[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termgrid"
version = "0.1.0"
description = "Building blocks for a terminal emulator: grid positions, cells, colour parsing, synchronized updates, write queueing and layout."
requires-python = ">=3.10"
dependencies = [
    "wcwidth",
]
keywords = [
    "terminal",
    "terminal-emulator",
    "ansi",
    "escape-sequences",
    "vt100",
    "grid",
]
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
    "Topic :: Terminals :: Terminal Emulators/X Terminals",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["termgrid"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
