#!/usr/bin/env python3
"""
Setup script for envfallback package.
"""

from setuptools import setup, find_packages

setup(
    name="envfallback",
    version="0.1.0",
    description="Environment variable overrides with typed configuration record fallbacks",
    author="envfallback contributors",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
