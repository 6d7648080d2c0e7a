# setup.py
from setuptools import setup, find_packages

setup(
    name="diophantine_search",
    version="0.1.0",
    description="Modular filters and bounded trial search for A*x^n + B = C*y^m + D",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "sympy",
        "numpy",
        "matplotlib",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "dioph-search = diophantine_search.cli:main",
        ],
    },
)
