[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xpplayer"
version = "0.1.0"
description = "A small desktop MP3 player with a playlist, progress bar and volume control"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["mp3", "music", "player", "playlist", "audio", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Players :: MP3",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
xpplayer = "xpplayer.app:main"

[tool.hatch.build.targets.wheel]
packages = ["xpplayer"]

[tool.pytest.ini_options]
addopts = "-ra"
