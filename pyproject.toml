[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gradfit"
version = "0.1.0"
description = "Linear and logistic regression trained by batch gradient descent, in plain Python"
requires-python = ">=3.10"
dependencies = []
keywords = ["machine learning", "gradient descent", "linear regression", "logistic regression"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gradfit-linear = "gradfit.linear_demo:main"
gradfit-logistic = "gradfit.logistic_demo:main"

[tool.hatch.build.targets.wheel]
packages = ["gradfit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
