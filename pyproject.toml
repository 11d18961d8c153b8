[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bidtree"
version = "1.0.0"
description = "Load auction bids from CSV into a binary search tree, plus a small client service-choice console"
requires-python = ">=3.10"
dependencies = []
keywords = ["binary search tree", "csv", "bids", "auction", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bidtree = "bidtree.tree:main"
bidtree-clients = "bidtree.clients:main"

[tool.hatch.build.targets.wheel]
packages = ["bidtree"]

[tool.hatch.build.targets.sdist]
include = ["bidtree", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
