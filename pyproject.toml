[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "simplejudge"
version = "1.0.0"
description = "A small terminal judge: user accounts, a problem set and compile-and-compare submission checking."
requires-python = ">=3.10"
dependencies = []
keywords = ["judge", "online judge", "programming exercises", "education", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
simplejudge = "simplejudge.judge:main"

[tool.hatch.build.targets.wheel]
packages = ["simplejudge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
