[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vidscout"
version = "0.1.0"
description = "A command-line tool that finds the media behind web pages and downloads it"
requires-python = ">=3.10"
keywords = ["video", "downloader", "youku", "vimeo", "tumblr", "ffmpeg"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Video",
    "Topic :: Internet :: WWW/HTTP",
]
dependencies = [
    "requests",
    "beautifulsoup4",
    "termcolor",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
vidscout = "vidscout.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["vidscout"]

[tool.pytest.ini_options]
addopts = "-ra"
