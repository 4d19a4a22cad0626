[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubscene"
version = "0.1.0"
description = "Scene file parsing, XPM texture loading and in-memory images for a small raycaster"
requires-python = ">=3.10"
dependencies = []
keywords = ["xpm", "raycaster", "scene", "texture", "image", "x11-colors"]
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
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cubscene = "cubscene.scene:main"

[tool.hatch.build.targets.wheel]
packages = ["cubscene"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
