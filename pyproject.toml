[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vftext"
version = "0.1.0"
description = "Text layout and glyph geometry: UTF conversions, line breaking, alignment, Bezier subdivision and polygon union"
requires-python = ">=3.10"
dependencies = []
keywords = ["text", "fonts", "glyphs", "layout", "unicode", "bezier", "polygon"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Fonts",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["vftext"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
