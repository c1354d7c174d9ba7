# setup.py
from setuptools import setup, find_packages

setup(
    name="lisper",
    version="0.1.0",
    description="A barebones LISP-family interpreter",
    packages=find_packages(include=["lisper", "lisper.*"]),
    python_requires=">=3.11",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["lisper=lisper.__main__:main"],
    },
    zip_safe=False,
)
