# setup.py
from setuptools import setup, find_packages

setup(
    name="tlisp",
    version="0.1.0",
    description="A small Lisp: S-expression reader, printer and tree-walking evaluator",
    packages=find_packages(include=["tlisp", "tlisp.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["tlisp=tlisp.__main__:main"],
    },
    zip_safe=False,
)
