# setup.py
from setuptools import setup, find_packages

setup(
    name="filipe",
    version="0.1.0",
    description="Tree-walking evaluation engine for the Filipe scripting language",
    packages=find_packages(include=["filipe", "filipe.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
