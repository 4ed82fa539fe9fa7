[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "swagdoc"
version = "0.1.0"
description = "Aligns Swagger 2.0 annotation comments in Go sources, with struct-tag reading and sample Flask services"
requires-python = ">=3.10"
keywords = ["swagger", "openapi", "documentation", "annotations", "formatter", "struct-tags"]
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
    "Topic :: Software Development :: Documentation",
]
dependencies = [
    "flask",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
swagdoc = "swagdoc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["swagdoc"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
