"""Setup script for the cashflow simulator package."""

from setuptools import setup, find_packages

# Read long description from README
with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="cashflow-sim",
    version="0.1.0",
    description="Deterministic day-by-day personal cashflow simulator with peer-to-peer lending",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=[
        "core", "core.*",
        "accounts", "accounts.*",
        "lineitems", "lineitems.*",
        "distributions", "distributions.*",
        "engine", "engine.*",
        "reports", "reports.*",
        "scenarios", "scenarios.*",
        "app", "app.*",
    ]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Financial and Insurance Industry",
        "Topic :: Office/Business :: Financial",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.24.0",
        "pandas>=2.0.0",
        "python-dateutil>=2.8.2",
        "pydantic>=2.0.0",
        "python-json-logger>=3.1.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.3.0",
            "pytest-cov>=4.0.0",
            "black>=23.3.0",
            "flake8>=6.0.0",
            "mypy>=1.3.0",
            "isort>=5.12.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "cashflow-sim=app.cli:main",
        ],
    },
    include_package_data=True,
    zip_safe=False,
)
