[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "agentskills"
version = "0.1.0"
description = "Discover, parse and register agent skills defined in SKILL.md files"
requires-python = ">=3.10"
keywords = ["agent", "skills", "skill-md", "frontmatter", "registry"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["agentskills"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
