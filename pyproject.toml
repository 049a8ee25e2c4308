[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "netmaskinfo"
version = "0.1.0"
description = "Describe an IPv4 address with its prefix length: class, privacy, binary form, mask and host count."
requires-python = ">=3.10"
dependencies = []
keywords = ["ipv4", "netmask", "subnet", "cidr", "networking"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Education",
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
netmaskinfo = "netmaskinfo.report:main"

[tool.hatch.build.targets.wheel]
packages = ["netmaskinfo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
