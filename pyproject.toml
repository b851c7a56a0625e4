[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "spotifind"
version = "0.1.0"
description = "Console song catalogue: load a song dataset, search it by genre, artist or tempo, and build playlists."
requires-python = ">=3.10"
dependencies = []
keywords = ["music", "songs", "playlist", "csv", "catalogue"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
spotifind = "spotifind.cli:main"

[tool.setuptools.packages.find]
include = ["spotifind*"]

[tool.pytest.ini_options]
addopts = "-ra"
