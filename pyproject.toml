[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "terraingen"
version = "0.1.0"
description = "Procedural terrain generation with Perlin fBm height maps, tactical zone planning, meshing and PNG export."
requires-python = ">=3.10"
keywords = ["terrain", "procedural", "perlin", "noise", "heightmap", "level-design", "zones", "mesh"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
terraingen = "terraingen.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["terraingen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
