from setuptools import setup, find_packages

setup(
    name="birdctl",
    version="0.1.0",
    description="Client for the BIRD routing daemon's control socket",
    license="MIT",
    packages=find_packages(include=["birdctl", "birdctl.*"]),
    install_requires=[
        "typer>=0.12.0",
        "rich>=13.0.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "birdctl=birdctl.main:birdctl",
        ],
    },
    python_requires=">=3.10",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
)
