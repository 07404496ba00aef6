""" ecfpk build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import ecfpk

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=ecfpk.name,
    version=ecfpk.__version__,
    license=ecfpk.__license__,
    author=ecfpk.__author__,
    author_email=ecfpk.__author_email__,
    description="Elliptic curves over extension fields F_{p^k}",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"ecfpk": ["data/*.json"]},
    install_requires=["dataclasses-json"],
    extras_require={"test": ["pytest"]},
    keywords="elliptic-curves finite-fields extension-fields galois-fields",
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
