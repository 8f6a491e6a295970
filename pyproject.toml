[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glidemesh"
version = "0.1.0"
description = "Wavefront OBJ/MTL mesh loading with materials, plus Voodoo2-era register, DAC, video timing and clock helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["obj", "mtl", "wavefront", "mesh", "3d", "glide", "video-timing", "clock-synthesis"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["glidemesh"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
