[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jetpac"
version = "0.1.0"
description = "A Jetpac-style arcade game: fly, shoot aliens, rebuild and refuel your rocket"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "jetpac", "pygame", "retro"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
jetpac = "jetpac.game:main"

[tool.hatch.build.targets.wheel]
packages = ["jetpac"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
