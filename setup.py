# setup.py
from setuptools import setup, find_packages

setup(
    name="parens",
    version="1.0.0",
    description="Embeddable interpreter for a small LISP-family language",
    packages=find_packages(include=["parens", "parens.*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
