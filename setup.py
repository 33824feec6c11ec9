"""Configuration for the gpt3enc package."""

from setuptools import setup, find_packages


setup(
    name="gpt3enc",
    version="0.1.0",
    packages=find_packages(exclude=["scripts", "scripts.*"]),
    install_requires=[
        "numpy",
        "regex",
    ],
    extras_require={
        "scripts": [
            "psutil",
            "requests",
            "tiktoken",
        ],
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "gpt3enc=gpt3enc.cli:main",
        ],
    },
    zip_safe=False,
)
