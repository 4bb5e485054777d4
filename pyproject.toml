[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cc232"
version = "0.1.0"
description = "Teaching library of classic data structures and algorithms: stacks, queues, expression evaluation, N-Queens, mazes, binary trees, search trees and heaps."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "algorithms",
    "stack",
    "queue",
    "binary tree",
    "binary search tree",
    "heap",
    "n-queens",
    "teaching",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cc232-demo4 = "cc232.demos4:main"
cc232-demo5 = "cc232.demos5:main"
cc232-line-stats = "cc232.line_stats:main"
cc232-const-refs = "cc232.warmup_vector:main"
cc232-bench = "cc232.mini_bench:main"
cc232-stl-demo = "cc232.stl_demo:main"

[tool.hatch.build.targets.wheel]
packages = ["cc232"]

[tool.hatch.build.targets.sdist]
include = ["cc232", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
