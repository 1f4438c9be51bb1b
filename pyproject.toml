[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spacesim"
version = "0.1.0"
description = "A small Newtonian gravity simulation of the Earth and Moon, with a free-flying camera."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["gravity", "orbit", "n-body", "simulation", "physics", "camera"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
spacesim = "spacesim.simulation:main"

[tool.hatch.build.targets.wheel]
packages = ["spacesim"]

[tool.pytest.ini_options]
addopts = "-ra"
