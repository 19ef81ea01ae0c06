[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flocksim"
version = "0.1.0"
description = "Boids flocking rules (separation, alignment, cohesion) and a flock container with a wrapping 3D box."
requires-python = ">=3.10"
dependencies = []
keywords = ["boids", "flocking", "simulation", "artificial life", "swarm"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Artificial Life",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["flocksim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
