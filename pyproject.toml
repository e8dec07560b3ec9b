[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "automaton-dot"
version = "0.1.0"
description = "Render Mealy, Moore and finite automata described in semicolon-separated tables as Graphviz DOT graphs"
requires-python = ">=3.10"
dependencies = []
keywords = ["automaton", "mealy", "moore", "finite-state", "graphviz", "dot", "csv"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
automaton-dot = "automaton_dot.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["automaton_dot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
