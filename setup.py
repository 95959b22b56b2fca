#!/usr/bin/env python3
"""
Setup script for Voyage Catalog.
"""
from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="voyage-catalog",
    version="1.0.0",
    author="Voyage Coffee Engineering",
    description="CSV ingestion and product family grouping for the Voyage coffee storefront",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    install_requires=[
        "pandas>=1.5",
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "catalog-cli=voyage_catalog.cli.catalog_cli:main",
        ],
    },
)
