[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "threadlab"
version = "0.1.0"
description = "Thread synchronisation demos, a bounded shared buffer and robust I/O helpers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "threads",
    "concurrency",
    "semaphore",
    "mutex",
    "race condition",
    "producer consumer",
    "robust io",
    "sockets",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
threadlab-counter = "threadlab.counters:main"
threadlab-greet = "threadlab.greetings:main"

[tool.hatch.build.targets.wheel]
packages = ["threadlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
