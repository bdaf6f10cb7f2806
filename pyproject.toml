[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "latren"
version = "0.1.0"
description = "Engine-independent building blocks for a small game engine: components, events, text layout, terrain, UI geometry and more"
requires-python = ">=3.10"
dependencies = []
keywords = ["game engine", "entity component", "events", "text layout", "terrain"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["latren"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
