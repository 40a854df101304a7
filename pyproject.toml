[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pongrework"
version = "1.0.0"
description = "A two-player vertical Pong game with rigid-body physics, panned sound effects and an on-screen volume panel"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["pong", "game", "arcade", "pygame", "two-player"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
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
pongrework = "pongrework.game:main"

[tool.hatch.build.targets.wheel]
packages = ["pongrework"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
