"""Settings for building package."""

from setuptools import find_packages, setup

from archive_folder import __author__, __title__, __version__

with open("requirements.txt") as reqs:
    requirements = reqs.read().splitlines()

setup(
    # There are some restrictions on what makes a valid project name
    # specification here:
    # https://packaging.python.org/specifications/core-metadata/#name
    name="archive_folder",
    # Versions should comply with PEP 440:
    # https://www.python.org/dev/peps/pep-0440/
    version=__version__,
    description=__title__,
    author=__author__,
    classifiers=["License :: OSI Approved :: MIT License"],
    # Instead of listing each package manually, we can use find_packages() to
    # automatically discover all packages and subpackages.
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.12",
    install_requires=requirements,
    extras_require={
        "test": ["coverage>=7.0", "pytest>=8.0", "pytest-cov>=4.1"],
    },
)
