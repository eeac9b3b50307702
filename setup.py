import os

from setuptools import find_packages, setup


def read(fname):
    return open(os.path.join(os.path.dirname(__file__), fname)).read()


long_description = read("README.md") if os.path.isfile("README.md") else ""

setup(
    name="dex-indexer-db",
    version="1.0",
    description="Schema and table lifecycle tools for the DEX activity indexer store",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests*"]),
    include_package_data=True,
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.10",
    ],
    keywords="ethereum dex indexer sqlalchemy",
    python_requires=">=3.10,<4",
    install_requires=read("requirements.txt").strip().split("\n"),
    extras_require={
        "tests": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "dexdb=dexdb.cli:cli",
        ],
    },
)
