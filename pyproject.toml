[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pattern-drills"
version = "0.1.0"
description = "Classic beginner programming drills: text patterns, simple sorts and small number calculators."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "patterns",
    "pascal-triangle",
    "sorting",
    "exercises",
    "calculators",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pattern-drills = "pattern_drills.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pattern_drills"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
