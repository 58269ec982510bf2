[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tartine"
version = "0.1.0"
description = "HTTP building blocks: status codes, dates, headers, cookies, addresses, Base64, byte views, bit flags and a level-filtered logger"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "cookies", "headers", "status-codes", "base64", "networking", "address"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tartine"]

[tool.hatch.build.targets.sdist]
include = ["tartine", "tests", "README.md", "pyproject.toml"]

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
