"""
Setup script for Cluster Registry
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README for long description
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text() if readme_file.exists() else ""

setup(
    name="cluster-registry",
    version="0.1.0",
    description="Client-side node registry for a distributed cluster connector",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["cluster_registry", "cluster_registry.*"]),
    entry_points={
        "console_scripts": [
            "cluster-registry=cluster_registry.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Topic :: System :: Distributed Computing",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
    python_requires=">=3.8",
    install_requires=[
        "pydantic>=2.0",
        "click>=8.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ],
    },
)
