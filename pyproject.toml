[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "circuitsim"
version = "0.1.0"
description = "Console simulator of digital integrated circuits, with a set of small numeric and logic command-line tools"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "digital logic",
    "integrated circuit",
    "boolean expression",
    "truth table",
    "simulator",
    "shunting yard",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
circuitsim = "circuitsim.cli:main"
circuitsim-bmi = "circuitsim.bmi:main"
circuitsim-barrel-vertical = "circuitsim.barrel:main_vertical"
circuitsim-barrel-horizontal = "circuitsim.barrel:main_horizontal"
circuitsim-maxnum = "circuitsim.maxnum:main"
circuitsim-swap = "circuitsim.swap:main"
circuitsim-circle = "circuitsim.circle:main"
circuitsim-xor = "circuitsim.logic:main_xor"
circuitsim-logicfunc = "circuitsim.logic:main_function"
circuitsim-attendance = "circuitsim.attendance:main"
circuitsim-calc = "circuitsim.calculator:main"
circuitsim-count = "circuitsim.stringcount:main"

[tool.hatch.build.targets.wheel]
packages = ["circuitsim"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
