[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "netcalc"
version = "0.1.0"
description = "IPv4 network calculator: ranges, masks, broadcast addresses, host counts and subnet splits"
requires-python = ">=3.10"
dependencies = []
keywords = ["ipv4", "subnet", "cidr", "netmask", "broadcast", "network", "calculator"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: System Administrators",
    "Natural Language :: French",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
netcalc = "netcalc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["netcalc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
