#!/usr/bin/env python

from setuptools import find_packages, setup

install_requires = [
    "httpx>=0.27",
    "hypothesis>=6.100",
    "pydantic>=2.5",
    "PyYAML>=6.0.1",
    "structlog>=24.1",
]

tests_requires = [
    "pytest>=7.1.2",
    "respx>=0.21",
]

setup(
    name="coffeeshop-model",
    version="0.1.0",
    author="Coffee Shop Team",
    license="MIT",
    description="Model-based property tests for the coffee shop order service.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    python_requires=">=3.9",
    install_requires=install_requires,
    extras_require={"tests": tests_requires},
    packages=find_packages(include=["coffeeshop_model", "coffeeshop_model.*"]),
    classifiers=[
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Framework :: Hypothesis",
    ],
)
