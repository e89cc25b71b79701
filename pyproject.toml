[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dicomtk"
version = "0.1.0"
description = "Building blocks for DICOM: person names, VR codes, image frames and binary stream I/O"
requires-python = ">=3.10"
keywords = ["dicom", "medical imaging", "person name", "value representation", "binary io"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Healthcare Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["dicomtk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
