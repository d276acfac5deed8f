import os

from setuptools import find_packages, setup

setup(
    name="hash_schema",
    version="0.1.0",
    packages=find_packages(include=["hash_schema", "hash_schema.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.10.6,<3.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "hypothesis>=6.0",
        ],
    },
    author="hash_schema Contributors",
    description="Composable structural validation with shape-preserving error trees",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
)
