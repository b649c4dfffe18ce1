import os
import re

import setuptools
from setuptools import find_packages

root = os.path.abspath(os.path.dirname(__file__))

with open(os.path.join(root, "README.md"), "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open(os.path.join(root, "az_analyze_image", "version.py"), "r") as fh:
    __version__ = re.search(r'__version__ = "([^"]+)"', fh.read()).group(1)


def read_requirements(path):
    if not isinstance(path, list):
        path = [path]
    requirements = []
    for p in path:
        with open(os.path.join(root, p)) as fh:
            requirements.extend([line.strip() for line in fh if line.strip()])
    return requirements


setuptools.setup(
    name="az-analyze-image",
    version=__version__,
    description="Typed client for the Azure AI Services Analyze Image API (v3.2 and v4.0 preview).",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(
        where=".",
        include=("az_analyze_image", "az_analyze_image.*"),
    ),
    install_requires=read_requirements(["requirements/requirements.txt"]),
    extras_require={
        "test": read_requirements(["requirements/requirements.test.unit.txt"]),
    },
    classifiers=[
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Topic :: Scientific/Engineering :: Image Recognition",
        "Typing :: Typed",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
)
