[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "maecdsp"
version = "0.1.0"
description = "Pure Python audio DSP helpers: convolution, filter kernels, sample format conversion and PCM wave I/O"
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "dsp", "convolution", "filter", "kernel", "wav", "sinc", "pcm"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["maecdsp"]

[tool.pytest.ini_options]
addopts = "-ra"
