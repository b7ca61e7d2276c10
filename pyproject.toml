[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "student-organizer"
version = "0.1.0"
description = "Load, sort, analyse and save student grade records kept in CSV files"
requires-python = ">=3.10"
dependencies = []
keywords = ["students", "grades", "csv", "sorting", "bubble sort", "merge sort"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Portuguese (Brazilian)",
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
student-organizer = "student_organizer.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["student_organizer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
