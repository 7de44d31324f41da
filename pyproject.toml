[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "colordna"
version = "0.1.0"
description = "Colour DNA/RNA sequences and quality scores in terminal output"
requires-python = ">=3.10"
keywords = ["bioinformatics", "dna", "rna", "fasta", "fastq", "sam", "vcf", "terminal", "ansi"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
    "Topic :: Utilities",
]
dependencies = [
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
colordna = "colordna.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["colordna"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
