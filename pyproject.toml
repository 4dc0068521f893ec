[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "materialhue"
version = "0.1.0"
description = "Material color utilities: CAM16 and HCT color spaces, tonal palettes, blending and color quantization"
requires-python = ">=3.10"
dependencies = []
keywords = ["color", "material", "hct", "cam16", "palette", "quantization", "theme"]
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
    "Topic :: Multimedia :: Graphics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["materialhue"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
