#!/usr/bin/env python3
"""
Setup file for redfile-reader
"""

from setuptools import setup, find_packages

setup(
    name="redfile-reader",
    version="0.1.0",
    description="A validating reader for redfile columnar files",
    author="",
    author_email="",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["redfile_reader"],
    python_requires=">=3.11",
    install_requires=[
        "thrift",
    ],
    extras_require={
        "dev": [
            "pytest",
            "coverage",
        ],
    },
    entry_points={
        "console_scripts": [
            "redfile-reader=redfile_reader:main",
        ],
    },
)
