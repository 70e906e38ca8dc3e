[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rmwcore"
version = "0.1.0"
description = "Core data types of a robotics middleware interface: return codes, QoS profiles, events, sequences, discovery and init options, namespace validation"
requires-python = ">=3.10"
dependencies = []
keywords = ["middleware", "robotics", "qos", "namespace", "discovery"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rmwcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
