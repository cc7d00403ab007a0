[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dslabs"
version = "0.1.0"
description = "Classic data structures (vector, array, stack, list, queue, AVL tree, graph) and small algorithm exercises built on them"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "algorithms",
    "avl-tree",
    "graph",
    "floyd-warshall",
    "linked-list",
    "stack",
    "queue",
    "postfix",
    "maze",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dslabs-evens = "dslabs.evens:main"
dslabs-postfix = "dslabs.postfix:main"
dslabs-maze = "dslabs.maze:main"
dslabs-shortest-paths = "dslabs.shortest_paths:main"
dslabs-benchmark = "dslabs.benchmark:main"

[tool.hatch.build.targets.wheel]
packages = ["dslabs"]

[tool.hatch.build.targets.sdist]
include = ["dslabs", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
