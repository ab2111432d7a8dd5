[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "osalgos"
version = "0.1.0"
description = "Classic operating-system algorithms: CPU scheduling, the Banker's algorithm, threaded matrix multiplication and a fixed-record student database"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating systems",
    "scheduling",
    "round robin",
    "bankers algorithm",
    "deadlock",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
osalgos-schedule = "osalgos.scheduling:main"
osalgos-bankers = "osalgos.bankers:main"
osalgos-matmul = "osalgos.matmul:main"
osalgos-studentdb = "osalgos.studentdb:main"
osalgos-forkdemo = "osalgos.forkdemo:main"

[tool.hatch.build.targets.wheel]
packages = ["osalgos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
