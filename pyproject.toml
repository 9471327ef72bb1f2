[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gobox"
version = "0.1.0"
description = "Fetch, track and reuse Go packages across projects"
requires-python = ">=3.10"
dependencies = [
    "click",
]
keywords = ["go", "golang", "packages", "modules", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gobox = "gobox.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gobox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
