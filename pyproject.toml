[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "estibador"
version = "0.1.0"
description = "Estibador de Ilusiones: a small state-driven game built on pygame"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "pygame", "state machine", "menu"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
estibador = "estibador.game:main"

[tool.hatch.build.targets.wheel]
packages = ["estibador"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
