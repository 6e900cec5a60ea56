[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hlstags"
version = "0.1.0"
description = "Typed models for HTTP Live Streaming playlist tags, with validation of parsed tags and line serialisation"
requires-python = ">=3.10"
dependencies = []
keywords = ["hls", "m3u8", "playlist", "streaming", "video", "low-latency"]
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
    "Topic :: Multimedia :: Video",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hlstags"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
