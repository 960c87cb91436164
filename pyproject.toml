[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dola"
version = "0.1.0"
description = "A small dense neural network toolkit with 32, 16 and 8 bit float scalars and an image-folder classification loader"
requires-python = ">=3.10"
keywords = ["neural-network", "mnist", "float16", "float8", "classification"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
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
dola = "dola.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dola"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
