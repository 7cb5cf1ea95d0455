[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bedrockdefs"
version = "0.1.0"
description = "Block-game server definitions: enumerations for actors, commands, diagnostics and scripting, a connection record, and Vec2/Vec3 math."
requires-python = ">=3.10"
dependencies = []
keywords = ["bedrock", "game", "server", "enum", "vector", "math"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bedrockdefs-sample = "bedrockdefs.sample:main"

[tool.hatch.build.targets.wheel]
packages = ["bedrockdefs"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
