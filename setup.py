import os
from setuptools import setup, find_packages

setup(
    name="task-priority",
    version="1.0.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        "structlog",
        "pyyaml",    # pour config files
    ],
    extras_require={
        "dev": [
            "pytest",
            "black",
            "mypy",
        ]
    },
    description="Abstract task priorities shared between the parts of a program",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
)
