# setup.py
from setuptools import setup, find_packages

setup(
    name="jexp",
    version="0.1.0",
    description="Evaluator for JExp, an expression language written as JSON-shaped data",
    packages=find_packages(include=["jexp", "jexp.*"]),
    package_data={"jexp": ["prelude/*.json"]},
    python_requires=">=3.10",
    extras_require={"test": ["pytest"]},
    zip_safe=False,
)
