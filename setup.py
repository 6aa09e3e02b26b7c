# setup.py
from setuptools import setup, find_packages

setup(
    name="site_rag",
    version="0.1.0",
    description="Ingest a website into a vector index and answer questions about it",
    packages=find_packages(exclude=("tests", "tests.*")),
    install_requires=[
        "aiohttp>=3.9",
        "beautifulsoup4>=4.12",
        "chromadb>=0.5.5",
        "click>=8.1",
        "cohere>=5.11",
        "pydantic>=2.5",
        "python-dotenv>=1.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": ["site-rag=site_rag.cli:cli"],
    },
    python_requires=">=3.11",
)
