from setuptools import setup, find_packages

setup(
    name="chargex",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pyyaml",
        "pydantic",
        "pymongo",
    ],
    extras_require={
        "dev": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "chargex=chargex.cli:main",
        ],
    },
)
