"""
===============================================================================
Setup Script for Project Packaging and Distribution
===============================================================================
Manages project metadata, dependencies, and distribution packaging.
"""

from setuptools import setup, find_packages

setup(
    name="focusify",  # Project name
    version="1.0.0",   # Version
    description="Server-rendered focus timer with desktop and web modes",
    packages=find_packages(include=[
        "utils",
        "routes",
        "middleware",
        "utils.*",
        "routes.*",
        "middleware.*"
    ]),
    py_modules=["app"],
    package_data={
        "utils": ["templates/*/*"],
    },
    install_requires=[
        "flask",
        "jinja2",
        "python-dotenv"
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'focusify=app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.9',
)
