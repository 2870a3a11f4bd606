[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "moodterm"
version = "1.0.0"
description = "A playful graphical terminal whose colours follow its mood, with pong, fireworks and ASCII waves."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["terminal", "mood", "pong", "fireworks", "pygame", "toy"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
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
moodterm = "moodterm.terminal:main"

[tool.hatch.build.targets.wheel]
packages = ["moodterm"]

[tool.pytest.ini_options]
addopts = "-ra"
