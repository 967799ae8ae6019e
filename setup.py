#!/usr/bin/env python3

from setuptools import setup, find_packages
import os

directory = os.path.dirname(os.path.realpath(__file__))


if __name__ == "__main__":
    setup(
        name="canvasmath",
        packages=find_packages(include=["canvasmath", "canvasmath.*"]),
        python_requires='>3.10.0',
        version="0.1.0",
        license="MIT",
        description="Easing curves and 2D affine transform utilities for canvas objects",
        long_description=open(os.path.join(
            directory, "README.md"), "r", encoding="utf8").read(),
        long_description_content_type="text/markdown",
        keywords=["easing", "tween", "affine", "canvas"],
        classifiers=[],
        include_package_data=True,
        install_requires=[
            "numpy",
        ],
        extras_require={
            "test": ["pytest"],
        },
        zip_safe=False,
    )
