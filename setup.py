from setuptools import setup, find_packages

setup(
    name="tintline",
    version="0.1.0",
    description="ANSI color and text-effect styling for terminal output",
    packages=find_packages(include=["tintline", "tintline.*"]),
    install_requires=[
        "rich",
        "prompt-toolkit",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.11",
)
