[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "usv_telemetry"
version = "0.1.0"
description = "Telemetry model and HTML dashboard for an unmanned surface vehicle"
requires-python = ">=3.10"
dependencies = []
keywords = ["usv", "telemetry", "dashboard", "marine", "html", "mock-data"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
usv-telemetry = "usv_telemetry.dashboard:main"

[tool.hatch.build.targets.wheel]
packages = ["usv_telemetry"]

[tool.pytest.ini_options]
addopts = "-ra"
