[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "relplz"
version = "0.1.0"
description = "Release helpers for Cargo workspaces: package comparison, release ordering, tag templates and pull request text."
requires-python = ">=3.11"
dependencies = ["jinja2"]
keywords = ["cargo", "release", "semver", "workspace", "templates"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["relplz"]

[tool.pytest.ini_options]
addopts = "-ra"
