#!/usr/bin/env python3
"""
Setup script for thicklinepy - sketch geometry for thick lines with arrow and T terminators.
"""

import pathlib

from setuptools import find_packages, setup

# The directory containing this file
HERE = pathlib.Path(__file__).parent

# The text of the README file
README = (
    (HERE / "README.md").read_text(encoding="utf-8")
    if (HERE / "README.md").exists()
    else "Sketch geometry for thick lines with arrow and T terminators."
)

setup(
    name="ThickLine-Py",
    version="0.1.0",
    description="Sketch geometry for thick lines with arrow and T terminators",
    long_description=README,
    long_description_content_type="text/markdown",
    author="Your Name",
    author_email="your.email@example.com",
    url="https://github.com/yourusername/thicklinepy",
    packages=find_packages(include=["thicklinepy", "thicklinepy.*"]),
    python_requires=">=3.8",
    install_requires=[
        # Core dependencies
        "numpy>=1.20.0",
        # Plotting and visualization
        "matplotlib>=3.5.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0.0",
            "pytest-cov>=2.10.0",
            "black>=21.0.0",
            "flake8>=3.8.0",
            "mypy>=0.800",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Scientific/Engineering :: Computer Aided Design (CAD)",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    keywords="cad, geometry, 2d, sketch, thick line, arrow",
    include_package_data=True,
    zip_safe=False,
)
