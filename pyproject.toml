[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "azenith"
version = "0.1.0"
description = "Background daemon that switches Android performance profiles when a listed game is in the foreground"
requires-python = ">=3.10"
keywords = ["android", "daemon", "performance", "profile", "game", "battery-saver"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: No Input/Output (Daemon)",
    "Intended Audience :: System Administrators",
    "Operating System :: Android",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]
dependencies = [
    "psutil",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
azenith = "azenith.daemon:main"
AZenith_log = "azenith.daemon:main"

[tool.hatch.build.targets.wheel]
packages = ["azenith"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
