[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lwlidar"
version = "0.1.0"
description = "Readers for LightWare laser rangefinders over serial, USB and I2C"
requires-python = ">=3.10"
dependencies = ["pyserial"]
keywords = ["lidar", "rangefinder", "serial", "i2c", "sf11", "sf30", "lightware"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Operating System :: Microsoft :: Windows",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Interface Engine/Protocol Translator",
    "Topic :: Terminals :: Serial",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lwlidar-i2c = "lwlidar.i2c:main"
lwlidar-sf11 = "lwlidar.sf11:main"
lwlidar-sf30-serial = "lwlidar.sf30_serial:main"
lwlidar-sf30-usb = "lwlidar.sf30_usb:main"

[tool.hatch.build.targets.wheel]
packages = ["lwlidar"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
