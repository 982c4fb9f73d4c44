"""Setup configuration for SIGHTLINE."""

from setuptools import find_packages, setup

setup(
    name="sightline",
    version="0.1.0",
    description="Data-flow network diagrams and follower atlases from spreadsheets and social APIs",
    python_requires=">=3.11",
    packages=find_packages(where="src", include=["sightline*"]),
    package_dir={"": "src"},
    install_requires=[
        "httpx>=0.27.0",
        "pandas>=2.2.0,<3",
        "numpy>=1.26.0",
        "pydantic>=2.6.0",
        "pydantic-settings>=2.1.0",
        "pyarrow>=15.0.0",
        "streamlit>=1.31.0",
        "plotly>=5.18.0",
        "networkx>=3.2",
        "matplotlib>=3.8.0",
        "wordcloud>=1.9.3",
    ],
    entry_points={
        "console_scripts": [
            "sightline=sightline.cli:cli_entry",
        ],
    },
    extras_require={
        "dev": [
            "pytest>=8.0.0",
            "pytest-mock>=3.12.0",
            "respx>=0.21.0",
            "python-dotenv>=1.0.0",
        ],
    },
)
