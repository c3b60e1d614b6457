[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xbusparse"
version = "0.1.0"
description = "Streaming parser for Xsens Xbus MTData2 messages from MTi motion trackers"
requires-python = ">=3.10"
dependencies = [
    "pyserial",
]
keywords = ["xsens", "xbus", "mti", "imu", "ahrs", "gnss", "serial", "parser"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Interface Engine/Protocol Translator",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
xbusparse = "xbusparse.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["xbusparse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
