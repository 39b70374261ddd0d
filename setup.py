"""Setup configuration for e2e-dsl tool."""

from setuptools import setup, find_packages

setup(
    name="e2e-dsl",
    version="0.1.0",
    description="DSL compiler for E2E browser test scenarios",
    packages=find_packages(include=["e2e_dsl", "e2e_dsl.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pyyaml>=6.0",
        "click>=8.1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "e2e-dsl=e2e_dsl.cli:main",
        ],
    },
)
