"""Setup script for Business Health Analytics."""

from setuptools import setup, find_packages

setup(
    name="business-health-analytics",
    version="1.0.0",
    description="Local Visibility Score and review sentiment trend engines for multi-location businesses",
    author="Business Health Team",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[
        "click>=8.1.0",
        "rich>=13.6.0",
        "loguru>=0.7.0",
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
        "pydantic-settings>=2.1.0",
        "python-dateutil>=2.8.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
        ]
    },
    entry_points={
        "console_scripts": [
            "business-health=business_health.cli:main",
        ],
    },
    python_requires=">=3.10",
)
