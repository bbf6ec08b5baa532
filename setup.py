# setup.py
from setuptools import setup, find_packages

setup(
    name="parsley",
    version="0.4.0",
    description="A small Scheme interpreter",
    packages=find_packages(include=["parsley", "parsley.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["parsley=parsley.cli:main"],
    },
    zip_safe=False,
)
