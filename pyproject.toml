[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "textprint"
version = "0.1.0"
description = "Small library for writing text to standard output or to a file"
requires-python = ">=3.10"
dependencies = []
keywords = ["print", "output", "text", "stream"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
textprint-demo = "textprint.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["textprint"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
