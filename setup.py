#!/usr/bin/env python3

from setuptools import setup, find_packages

setup(
    name="ImageLookup",
    version="0.0.1",
    packages=find_packages(
        exclude=["tests", "tests.*", "scripts", "results", "data", "configs", "logs",]
    ),
    install_requires=[
        "attrs",
        "mmengine",
        "numpy",
        "opencv-python",
        "tqdm",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.8",
)
