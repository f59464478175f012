"""
Setup script for the bloglist project.

Allows development installation with `pip install -e .`
"""

from setuptools import setup, find_packages

setup(
    name="bloglist",
    version="1.0.0",
    packages=find_packages(include=["bloglist", "bloglist.*"]),
    py_modules=["version"],
    package_data={"bloglist": ["templates/*.html"]},
    python_requires=">=3.11",
    install_requires=[
        "flask>=3.0",
        "pymongo>=4.6",
        "python-dotenv>=1.0",
        "markupsafe>=2.1",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-mock>=3.12",
            "mongomock>=4.1",
        ],
    },
    entry_points={
        "console_scripts": [
            "bloglist=bloglist.app:main",
            "bloglist-seed=bloglist.seed_blogs:main",
        ],
    },
)
