from setuptools import setup

from notion_export.version import __version__

setup(
    name="notion-export",
    version=__version__,
    author="Ceshine Lee",
    author_email="ceshine@ceshine.net",
    description="Export a Notion order database to CSV and JSON files",
    license="Apache License, Version 2.0",
    url="",
    packages=['notion_export'],
    python_requires=">=3.8",
    install_requires=[
        "requests",
        "typer",
        "polars",
    ],
    extras_require={
        "test": ["pytest", "pytest-mock"],
    },
    entry_points={
        "console_scripts": ["notion-export=notion_export.cli:main"],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9"
    ],
    keywords=""
)
