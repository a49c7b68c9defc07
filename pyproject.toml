[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tasksim"
version = "0.1.0"
description = "A threaded CPU scheduling simulator with priority, round-robin, FCFS and MLFQ policies"
requires-python = ">=3.10"
dependencies = []
keywords = ["scheduler", "simulation", "mlfq", "round-robin", "fcfs", "operating-systems"]
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
    "Topic :: Scientific/Engineering :: Information Analysis",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tasksim = "tasksim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tasksim"]

[tool.pytest.ini_options]
addopts = "-ra"
