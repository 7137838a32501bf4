[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixelstrip"
version = "0.1.0"
description = "Addressable LED strip colour types, palettes, pixel views and a controller registry in pure Python"
requires-python = ">=3.10"
dependencies = []
keywords = ["led", "rgb", "hsv", "palette", "pixels", "color"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["pixelstrip"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
