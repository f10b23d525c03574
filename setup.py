#!/usr/bin/env python
"""
Setup.py for routegraph.
"""

from setuptools import setup, find_packages

setup(
    name="routegraph",
    version="0.1.0",
    description="Structural analytics of directed route networks",
    python_requires=">=3.8",
    packages=find_packages(include=["routegraph", "routegraph.*"]),
    install_requires=[
        "numpy",
        "pandas",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "routegraph=routegraph.__main__:main",
        ],
    },
)
