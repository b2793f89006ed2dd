[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "seroost"
version = "0.1.0"
description = "Snowball English stemmer and a TF-IDF document ranking model"
requires-python = ">=3.10"
dependencies = []
keywords = ["search", "tf-idf", "stemming", "snowball", "indexing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Text Processing :: Indexing",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["seroost"]

[tool.pytest.ini_options]
addopts = "-ra"
