#!/usr/bin/env python
from setuptools import setup, find_packages


with open("README.md", encoding="utf-8") as f:
    long_description = f.read()


setup(
    name="undostack",
    description="A transaction-based undo/redo stack.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    use_scm_version={"write_to": "Lib/undostack/_version.py", "fallback_version": "0.1.0"},
    license="MIT",
    package_dir={"": "Lib"},
    packages=find_packages("Lib"),
    extras_require={
        "test": ["pytest"],
    },
    setup_requires=["setuptools_scm"],
    python_requires=">=3.7",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries",
        "License :: OSI Approved :: MIT License",
    ],
)
