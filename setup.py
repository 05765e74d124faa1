from setuptools import setup, find_packages

setup(
    name="euler-library",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.21",
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    author="Euler Library Team",
    description="Numeric and combinatorial helpers for solving Project Euler problems",
)
