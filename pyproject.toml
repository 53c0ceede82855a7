[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "threadlab"
version = "0.1.0"
description = "Small, runnable demonstrations of threads, locks, semaphores and condition variables"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "threads",
    "concurrency",
    "mutex",
    "semaphore",
    "condition-variable",
    "race-condition",
    "thread-pool",
    "teaching",
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
threadlab-cpu = "threadlab.cpu:main"
threadlab-counters = "threadlab.counters:main"
threadlab-pool = "threadlab.pool:main"
threadlab-booking = "threadlab.booking:main"
threadlab-semaphore = "threadlab.semaphore_steps:main"
threadlab-signals = "threadlab.signals:main"
threadlab-hello = "threadlab.hello:main"
threadlab-reminders = "threadlab.reminders:main"
threadlab-lounge = "threadlab.lounge:main"

[tool.hatch.build.targets.wheel]
packages = ["threadlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
