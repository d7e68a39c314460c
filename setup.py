"""Setup script for alx-showcase package."""

from setuptools import setup, find_packages

setup(
    name="alx-showcase",
    version="0.1.0",
    description="Detect and classify ALX curriculum projects among GitHub repositories",
    author="ALX Showcase contributors",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pyyaml>=6.0",
        "fastapi>=0.104.0",
        "pydantic>=2.4.2",
        "uvicorn>=0.24.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.3",
            "pytest-cov>=4.1.0",
            "httpx>=0.25.0",
            "black>=23.10.1",
            "isort>=5.12.0",
            "flake8>=6.1.0",
            "mypy>=1.6.1",
        ]
    },
    entry_points={
        "console_scripts": [
            "alx-showcase=alx_showcase.main:main",
            "alx-showcase-server=alx_showcase.web.server:main"
        ]
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
    python_requires=">=3.8",
)
