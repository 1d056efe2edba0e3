[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fishes"
version = "0.1.0"
description = "Spaced-repetition flashcards: build decks, study them and keep them in a JSON file."
requires-python = ">=3.10"
dependencies = []
keywords = ["flashcards", "spaced repetition", "study", "learning", "decks"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fishes = "fishes.app:main"

[tool.hatch.build.targets.wheel]
packages = ["fishes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
