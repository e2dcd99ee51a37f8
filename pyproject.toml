[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fifokit"
version = "0.1.0"
description = "Power-of-two FIFOs, record FIFOs, ring buffers and intrusive linked lists"
requires-python = ">=3.10"
dependencies = []
keywords = ["fifo", "ring buffer", "queue", "linked list", "hlist", "record fifo"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fifokit-demo = "fifokit.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["fifokit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
