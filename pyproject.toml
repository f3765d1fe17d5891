[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wildgammon"
version = "0.1.0"
description = "Backgammon engine core: dice, positions with GnuBG position IDs, mixed-roll move generation, neural-net inputs and training-data records."
requires-python = ">=3.10"
dependencies = []
keywords = ["backgammon", "board-game", "position-id", "move-generation", "neural-net-inputs"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wildgammon"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
