# setup.py
from setuptools import setup, find_packages

setup(
    name="seed_scout",
    version="0.1.0",
    description="Product URL discovery crawler for seed and nursery vendors",
    packages=find_packages(exclude=("tests", "tests.*")),
    package_data={"seed_scout": ["templates/*.j2"]},
    include_package_data=True,
    install_requires=[
        "aiohttp>=3.9",
        "beautifulsoup4>=4.12",
        "lxml>=5.0",
        "pydantic>=2.5",
        "PyYAML>=6.0",
        "click>=8.1",
        "Jinja2>=3.1",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "seed-scout=seed_scout.cli:cli",
        ],
    },
    python_requires=">=3.11",
)
