[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tekerectc"
version = "0.1.0"
description = "Extract example test cases from problem pages and judge a solution program against them locally"
requires-python = ">=3.10"
keywords = ["judge", "competitive-programming", "testcase", "online-judge", "testing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Testing",
    "Topic :: Education :: Testing",
]
dependencies = [
    "beautifulsoup4",
    "python-dotenv",
    "termcolor",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tekerectc = "tekerectc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tekerectc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
