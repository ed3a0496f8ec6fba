[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sodacan"
version = "0.1.0"
description = "A headless 2D scene engine core: events, layers, an entity-component scene, cameras, editor state and YAML scene files"
requires-python = ">=3.10"
dependencies = [
    "numpy",
    "pyyaml",
]
keywords = ["game engine", "ecs", "scene", "editor", "camera", "events", "layers"]
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
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["sodacan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
