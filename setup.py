from setuptools import setup, find_packages

setup(
    name="sonarbreak",
    version="0.1.0",
    packages=find_packages(include=["sonarbreak", "sonarbreak.*"]),
    python_requires=">=3.11",
    install_requires=[
        "click",
        "pyyaml",
        "pydantic>=2",
        "structlog",
        "rich",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "sonarbreak = sonarbreak.cli.main:main",
        ],
    },
)
