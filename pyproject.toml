[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stlkit"
version = "0.1.0"
description = "Small container and concurrency building blocks: linked deques, stacks, ordered and hashed maps, vectors and thread pools."
requires-python = ">=3.10"
dependencies = []
keywords = ["containers", "data-structures", "deque", "hash-map", "thread-pool", "vector"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["stlkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
