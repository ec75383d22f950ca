[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bbxfer"
version = "1.0.0"
description = "Building blocks for bulk file copying: MD5 checksums, file descriptor I/O with accounting, file descriptions and one-line file specification records"
requires-python = ">=3.10"
dependencies = []
keywords = ["copy", "transfer", "md5", "checksum", "file-spec", "file-descriptor"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
    "Topic :: System :: Archiving :: Mirroring",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bbxfer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
