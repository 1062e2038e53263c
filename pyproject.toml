[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "evolasm"
version = "0.1.0"
description = "A tile-world simulation sandbox with value-noise terrain, a follow camera and a keyboard-driven player"
requires-python = ">=3.10"
keywords = ["simulation", "game", "tiles", "value-noise", "pygame", "sandbox"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pillow",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
evolasm = "evolasm.core:main"

[tool.hatch.build.targets.wheel]
packages = ["evolasm"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
