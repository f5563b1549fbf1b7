[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "brickcolor"
version = "1.0.0"
description = "The Roblox BrickColor codes: names, numbers, hex values and RGBA colours."
requires-python = ">=3.10"
dependencies = []
keywords = ["roblox", "brickcolor", "color", "colour", "palette"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
brickcolor-generate = "brickcolor.generator:main"

[tool.hatch.build.targets.wheel]
packages = ["brickcolor"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
