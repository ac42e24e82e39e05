"""
Setup script for xornet - a one-hidden-layer backpropagation network.
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README for long description
readme_path = Path(__file__).parent / "README.md"
long_description = ""
if readme_path.exists():
    long_description = readme_path.read_text(encoding="utf-8")

setup(
    name="xornet",
    version="1.0.0",
    author="xornet contributors",
    description="Minimal feed-forward network trained by backpropagation on XOR",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["xornet", "xornet.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.19.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0.0",
            "pytest-cov>=2.10.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "xornet=xornet.__main__:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Artificial Intelligence",
    ],
    keywords="neural-network backpropagation xor sigmoid",
)
