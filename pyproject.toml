[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "maltese"
version = "0.1.0"
description = "A frameless desktop pet that plays looping frame animations of a Maltese and can be dragged around the screen"
requires-python = ">=3.10"
dependencies = []
keywords = ["desktop-pet", "animation", "maltese", "tkinter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
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
test = ["pytest"]

[project.scripts]
maltese = "maltese.app:main"

[tool.hatch.build.targets.wheel]
packages = ["maltese"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
