#!/usr/bin/env python
# -*- coding: utf-8 -*-

# install otelconfig
# pip install -e .[test]

import os
from setuptools import find_packages, setup

about = {}
here = os.path.abspath(os.path.dirname(__file__))
with open(
    os.path.join(here, "src", "otelconfig", "__version__.py"), mode="r", encoding="utf-8"
) as f:
    exec(f.read(), about)

def _read_reqs(relpath):
    fullpath = os.path.join(os.path.dirname(__file__), relpath)
    with open(fullpath) as f:
        return [s.strip() for s in f.readlines() if (s.strip() and not s.startswith("#"))]

REQUIREMENTS = _read_reqs("requirements.txt")

setup(
    name=about["__title__"],
    version=about["__version__"],
    description=about["__description__"],
    author=about["__author__"],
    author_email=about["__author_email__"],
    url=about["__url__"],
    license=about["__license__"],
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    include_package_data=True,
    python_requires=">=3.10, <4",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Topic :: System :: Monitoring",
    ],
    install_requires=REQUIREMENTS,
    extras_require={
        "jaeger": ["opentelemetry-exporter-jaeger-thrift"],
        "propagators": [
            "opentelemetry-propagator-aws-xray",
            "opentelemetry-propagator-ot-trace",
        ],
        "test": ["pytest"],
    },
)
