[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crowboard"
version = "1.0.0"
description = "A small in-memory JSON HTTP service for users and posts, with a SQLite user repository"
requires-python = ">=3.10"
keywords = ["http", "rest", "json", "flask", "sqlite", "users", "posts"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "flask",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
crowboard = "crowboard.api:main"

[tool.hatch.build.targets.wheel]
packages = ["crowboard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
