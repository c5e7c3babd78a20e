[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "multikeydea"
version = "0.1.0"
description = "Multi-key rotating XOR cipher with single-process and chunked parallel benchmarks"
requires-python = ">=3.10"
dependencies = []
keywords = ["xor", "encryption", "benchmark", "parallel", "cipher"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
multikeydea-bench = "multikeydea.benchmark:main"
multikeydea-parallel = "multikeydea.parallel:main"

[tool.hatch.build.targets.wheel]
packages = ["multikeydea"]

[tool.pytest.ini_options]
addopts = "-ra"
