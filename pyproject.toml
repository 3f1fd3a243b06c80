[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algotasks"
version = "1.0.0"
description = "Solutions to classic algorithmic exercises: MST range, clock sectors, LIS, heap sort traces and more"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "kruskal",
    "union-find",
    "heapsort",
    "topological-sort",
    "longest-increasing-subsequence",
    "exercises",
]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algotasks-cars = "algotasks.cars:main"
algotasks-clock = "algotasks.clock:main"
algotasks-crossing = "algotasks.crossing:main"
algotasks-heapsort = "algotasks.heapsort:main"
algotasks-helix = "algotasks.helix:main"
algotasks-mixtures = "algotasks.mixtures:main"
algotasks-penalty = "algotasks.penalty:main"
algotasks-walk = "algotasks.walk:main"

[tool.hatch.build.targets.wheel]
packages = ["algotasks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
