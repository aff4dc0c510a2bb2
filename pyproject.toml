[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nmea0183"
version = "0.7.0"
description = "Parsers for the data fields of NMEA 0183 sentences: GNSS, weather, water, radar and waypoint data"
requires-python = ">=3.10"
dependencies = []
keywords = ["nmea", "nmea0183", "gps", "gnss", "glonass", "parser", "navigation", "marine"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nmea0183"]

[tool.hatch.build.targets.sdist]
include = ["nmea0183", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
files = ["nmea0183"]
