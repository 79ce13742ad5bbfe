[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "filehttp"
version = "0.1.0"
description = "A minimal HTTP file server and a matching command-line downloader"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "server", "file-server", "download", "sockets"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
filehttp-server = "filehttp.server:main"
filehttp-client = "filehttp.client:main"

[tool.hatch.build.targets.wheel]
packages = ["filehttp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
