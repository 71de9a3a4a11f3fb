"""Setup configuration for the query filters package."""

from setuptools import setup, find_packages

setup(
    name="query-filters",
    version="1.0.0",
    description="URL-synchronised filter sessions with a schema-less query-string codec",
    author="Alex",
    author_email="",
    packages=find_packages(where="src") + ["config"],
    package_dir={"": "src", "config": "config"},
    package_data={"config": ["*.yaml"]},
    python_requires=">=3.11",
    install_requires=[
        "pandas>=2.1.0",
        "streamlit>=1.32.0",
        "python-dotenv>=1.0.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "dev": [
            "pytest>=8.0.0",
            "pytest-cov>=4.1.0",
            "black>=24.1.0",
            "ruff>=0.2.0",
        ],
    },
)
