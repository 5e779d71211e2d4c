#!/usr/bin/env python3
"""
Setup script for CKD XGBoost Classifier package
"""

from setuptools import setup, find_packages

# Read requirements from requirements.txt
with open('requirements.txt') as f:
    requirements = [line.strip() for line in f if line.strip() and not line.startswith('#')]

# Read version from __init__.py
with open('__init__.py') as f:
    for line in f:
        if line.startswith('__version__'):
            version = line.split('=')[1].strip().strip('"\'')
            break

setup(
    name="ckd_xgboost_classifier",
    version=version,
    description="Gradient-boosted tree classifier for chronic kidney disease status",
    author="CKD Classifier Team",
    author_email="example@example.com",
    url="https://github.com/example/ckd-xgboost-classifier",
    packages=find_packages(exclude=["test", "test.*"]),
    py_modules=["run_pipeline"],
    package_data={"src": ["*.yml"]},
    install_requires=requirements,
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Healthcare Industry",
        "Intended Audience :: Science/Research",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Topic :: Scientific/Engineering :: Medical Science Apps.",
        "Topic :: Scientific/Engineering :: Artificial Intelligence",
    ],
    python_requires=">=3.9",
    entry_points={
        "console_scripts": [
            "ckd-train=run_pipeline:main",
        ],
    },
)
