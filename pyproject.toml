[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fesca"
version = "0.1.0"
description = "Three-party replicated secret sharing of tabular data for secure collaborative analytics"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "secret sharing",
    "multi-party computation",
    "mpc",
    "replicated secret sharing",
    "privacy",
    "secure analytics",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fesca-rss = "fesca.rss:main"

[tool.hatch.build.targets.wheel]
packages = ["fesca"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
