#!/usr/bin/env python3

import setuptools
import bigq_version

with open("README.md", "r") as fd:
    long_description = fd.read()

setuptools.setup(
    name="pybigq",
    version=bigq_version.version,
    author="Florian Schanda",
    author_email="florian@schanda.org.uk",
    description="Exact rational numbers over arbitrary precision integers",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=["tests"]),
    python_requires=">=3.5, <4",
    extras_require={
        "test" : ["pytest"],
    },
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Software Development :: Libraries",
    ],
)
