[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "menudeck"
version = "0.1.0"
description = "Stacked menus and modal dialogs for pygame, described in a plain-text resource file"
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["pygame", "menu", "dialog", "ui", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Software Development :: Libraries :: pygame",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
menudeck = "menudeck.app:main"

[tool.hatch.build.targets.wheel]
packages = ["menudeck"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
