[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nobuild"
version = "0.1.0"
description = "Build C programs with plain Python code: commands, processes, files and self-rebuilding build programs."
requires-python = ">=3.10"
dependencies = []
keywords = ["build", "build-system", "compiler", "c", "cc", "gcc", "clang"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Operating System :: MacOS",
    "Programming Language :: C",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
nobuild = "nobuild.build:main"
nobuild-cc-demo = "nobuild.cc_demo:main"

[tool.hatch.build.targets.wheel]
packages = ["nobuild"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
