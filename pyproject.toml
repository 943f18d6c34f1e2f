[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stdplus"
version = "0.1.0"
description = "Small building blocks: combined hashing, mixed-type equality, formatted printing, signal blocking, string buffers, NUL-free string views, Ethernet and socket addresses"
requires-python = ">=3.10"
dependencies = []
keywords = ["hash", "variant", "string", "socket", "sockaddr", "ethernet", "mac", "utilities"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["stdplus"]

[tool.pytest.ini_options]
addopts = "-ra"
