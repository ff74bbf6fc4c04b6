[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "toomanylists"
version = "0.1.0"
description = "Singly linked stacks, a persistent list and a doubly linked deque"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "stack", "deque", "persistent", "data structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["toomanylists"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
