[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qrtiny"
version = "0.1.0"
description = "A tiny generator for version 1 (21x21) QR Codes"
requires-python = ">=3.10"
dependencies = []
keywords = ["qr", "qrcode", "barcode", "reed-solomon"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
qrtiny = "qrtiny.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["qrtiny"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
