[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "ledbench"
version = "0.1.0"
description = "Host-side models of a small microcontroller board: LED bar patterns, WS2812 LED stick, RTC registers, temperature averaging and the serial message protocol."
requires-python = ">=3.10"
dependencies = []
keywords = ["led", "ws2812", "rtc", "bcd", "ring-buffer", "embedded", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["ledbench*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
