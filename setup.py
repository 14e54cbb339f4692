# SPDX-FileCopyrightText: 2026 Giovanni MARIANO
#
# SPDX-License-Identifier: MPL-2.0

from setuptools import setup, find_packages


setup(
    name="csgray",
    version="0.1.0",
    description="Constructive solid geometry kernel for ray transport",
    license="MPL-2.0",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "numpy",
    ],
    extras_require={
        "plot": ["matplotlib"],
        "test": ["pytest", "matplotlib"],
    },
)
