[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "xprin"
version = "0.1.0"
description = "Shell hook execution and input staging helpers for a test runner"
requires-python = ">=3.10"
dependencies = []
keywords = ["testing", "hooks", "shell", "templates", "test-runner"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["xprin*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
