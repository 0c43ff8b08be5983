[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minichain"
version = "0.1.0"
description = "A toy proof-of-work blockchain network with an interactive menu and a textbook RSA calculator"
requires-python = ">=3.10"
dependencies = []
keywords = ["blockchain", "proof-of-work", "sha256", "rsa", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
minichain = "minichain.menu:main"
minichain-rsa = "minichain.calculator:main"

[tool.hatch.build.targets.wheel]
packages = ["minichain"]

[tool.pytest.ini_options]
addopts = "-ra"
