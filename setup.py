# setup.py
from setuptools import setup, find_packages

setup(
    name="teddy",
    version="0.1.0",
    description="A small Lisp-like expression language with closures and partial application",
    packages=find_packages(include=["teddy", "teddy.*"]),
    package_data={"teddy": ["prelude/*.teddy"]},
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
