[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pkrom"
version = "0.1.0"
description = "Read species data, names, dex entries and front/back pictures from first-generation Game Boy monster ROM images"
requires-python = ">=3.10"
dependencies = []
keywords = ["game boy", "rom", "sprites", "decompression", "bmp", "rom hacking"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pkrom-extract = "pkrom.extractor:main"

[tool.hatch.build.targets.wheel]
packages = ["pkrom"]

[tool.pytest.ini_options]
addopts = "-ra"
