#!/usr/bin/env python3
"""
Setup script for camunda-deploy.
"""

import codecs
import os
import re
from setuptools import setup, find_packages


def read(rel_path):
    """Read file content."""
    here = os.path.abspath(os.path.dirname(__file__))
    with codecs.open(os.path.join(here, rel_path), 'r', 'utf-8') as fp:
        return fp.read()


def find_version(rel_path):
    """Extract version from __version__.py file."""
    init_content = read(rel_path)
    version_match = re.search(
        r'^__version__\s*=\s*[\'"]([^\'"]*)[\'"]',
        init_content,
        re.MULTILINE
    )
    if version_match:
        return version_match.group(1)
    raise RuntimeError("Unable to find version string.")


if __name__ == "__main__":
    setup(
        name="camunda-deploy",
        version=find_version("camunda_deploy/__version__.py"),
        description="Deploy BPMN, CMMN and DMN resources to a Camunda engine",
        license="MIT",
        packages=find_packages(exclude=["tests*", "docs*", "examples*", "scripts*"]),
        python_requires=">=3.10",
        install_requires=[
            "click>=8.0",
            "rich>=12.0",
            "aiofiles>=22.1",
            "httpx>=0.24",
            "python-dotenv>=1.0",
        ],
        extras_require={
            "test": [
                "pytest>=7.0",
                "pytest-asyncio>=0.21",
            ],
        },
        entry_points={
            "console_scripts": [
                "camunda-deploy=camunda_deploy.cli.main:main",
            ],
        },
    )
