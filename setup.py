from setuptools import setup, find_packages

setup(
    name="pushover-sdk",
    version="0.1.0",
    description="Python SDK for the Pushover notification API",
    author="Pushover SDK Team",
    packages=find_packages(include=["pushover", "pushover.*"]),
    install_requires=[
        "httpx>=0.25.1",
        "pydantic>=2.0",
        "structlog>=23.1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.21",
        ],
    },
    python_requires=">=3.10",
)
