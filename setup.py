#!/usr/bin/env python

from setuptools import setup, find_packages

# Version info -- read without importing
_locals = {}
with open("mvnargs/_version.py") as fp:
    exec(fp.read(), None, _locals)
version = _locals["__version__"]

exclude = ["tests", "tests.*"]

setup(
    name="mvnargs",
    version=version,
    description="Fluent builder rendering Maven command-line arguments",
    license="BSD",
    long_description=open("README.rst").read(),
    python_requires=">=3.8",
    packages=find_packages(exclude=exclude),
    include_package_data=True,
    install_requires=["typing_extensions>=4.0"],
    extras_require={
        "testing": ["pytest>=7", "pytest-relaxed>=2", "pytest-cov>=4"],
        "dev": ["invoke>=2", "invocations>=3"],
    },
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Topic :: Software Development",
        "Topic :: Software Development :: Build Tools",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
