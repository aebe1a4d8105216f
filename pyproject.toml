[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drillwatch"
version = "5.1.1"
description = "Terminal status lines, rust-project.json generation and worked Python solutions to a course of small Rust exercises."
requires-python = ">=3.11"
dependencies = [
    "rich",
]
keywords = ["exercises", "learning", "rust", "rust-analyzer", "education", "drills"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Computer Aided Instruction (CAI)",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["drillwatch"]

[tool.hatch.build.targets.sdist]
include = [
    "drillwatch",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"
