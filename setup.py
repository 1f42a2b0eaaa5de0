#!/usr/bin/env python3
from setuptools import setup

import pysrp.const as pysrp_const

NAME = "SRP-python"
DESCRIPTION = "SRP-6a client implementation in python"
URL = "https://github.com/pysrp/{}".format(NAME)
AUTHOR = "SRP-python contributors"


PROJECT_URLS = {
    "Bug Reports": "{}/issues".format(URL),
    "Source": "{}/tree/master".format(URL),
}


MIN_PY_VERSION = ".".join(map(str, pysrp_const.REQUIRED_PYTHON_VER))

with open("README.md", "r", encoding="utf-8") as f:
    README = f.read()


REQUIRES = ["cryptography"]


setup(
    name=NAME,
    version=pysrp_const.__version__,
    description=DESCRIPTION,
    long_description=README,
    long_description_content_type="text/markdown",
    url=URL,
    author=AUTHOR,
    packages=["pysrp"],
    include_package_data=True,
    project_urls=PROJECT_URLS,
    python_requires=">={}".format(MIN_PY_VERSION),
    install_requires=REQUIRES,
    license="Apache License 2.0",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Topic :: Security :: Cryptography",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
