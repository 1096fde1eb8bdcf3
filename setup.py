"""
Setup script for pdfstitchx.

This script configures the package for installation via pip.
Supports both development and production installations.
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read the README for long description
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding='utf-8')

setup(
    name="pdfstitchx",
    version="1.0.0",
    description="Concatenate PDF files and page selections into one document using Ghostscript",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="pdfstitchx Contributors",
    author_email="",
    packages=find_packages(include=["pdfstitchx", "pdfstitchx.*"]),
    install_requires=[
        "click>=8.0.0",
        "rich>=13.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "pypdf>=3.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "pdf-stitcher=pdfstitchx.cli:cli",
        ],
    },
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "Topic :: Office/Business",
        "Topic :: Utilities",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Operating System :: OS Independent",
        "Environment :: Console",
    ],
    keywords="pdf merge stitch concatenate ghostscript pages",
    license="MIT",
    include_package_data=True,
    zip_safe=False,
)
