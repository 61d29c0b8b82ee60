# setup.py
from setuptools import setup, find_packages

setup(
    name="consteval",
    version="0.1.0",
    description="S-expression evaluator for named constants shared across generated sources",
    packages=find_packages(include=["consteval", "consteval.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
