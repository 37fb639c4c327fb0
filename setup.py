"""
Setup file.
"""

import os

from setuptools import find_packages, setup

URL = "https://github.com/copper-build/copper"
KEYWORDS = "c c++ build compiler toolchain gcc clang toml"
HERE = os.path.dirname(os.path.abspath(__file__))

VERSION = "0.1.0"


if __name__ == "__main__":
    setup(
        name="copper",
        version=VERSION,
        description="Minimal build configuration tool for C and C++ projects",
        keywords=KEYWORDS,
        url=URL,
        package_dir={"": "src"},
        packages=find_packages("src"),
        python_requires=">=3.8",
        install_requires=["toml"],
        extras_require={"test": ["pytest"]},
        entry_points={"console_scripts": ["copper=copper.cli:main"]},
        include_package_data=True)
