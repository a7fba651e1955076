from setuptools import setup, find_packages


setup(
    name="campaignbot",
    version="0.1.0",
    description="Minimal campaign coordinator driving pluggable helpers, scanners, weapons and encoders",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pydantic>=2.7",
        "pydantic-settings>=2.7",
        "typer>=0.12",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
        ]
    },
    entry_points={
        "console_scripts": [
            "campaignbot=campaignbot.cli:app",
        ]
    },
    python_requires=">=3.10",
)
