[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "code_challenges"
version = "0.1.0"
description = "Solutions to programming challenges, with a small generic tree model"
requires-python = ">=3.10"
dependencies = []
keywords = ["challenges", "hackerrank", "tree", "modular-arithmetic", "fibonacci"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
code-challenges = "code_challenges.strings:main"
scalar-products = "code_challenges.scalar_products.approach2:main"
scalar-products-naive = "code_challenges.scalar_products.approach1:main"

[tool.hatch.build.targets.wheel]
packages = ["code_challenges"]

[tool.pytest.ini_options]
addopts = "-ra"
