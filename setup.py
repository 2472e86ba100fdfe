"""Setup script for certificate-registry package following Cosmic Python pattern."""

from setuptools import setup, find_namespace_packages

setup(
    name="certificate-registry",
    version="1.0.0",
    description="Certificate Registry - records management and PDF certificates for deceased persons",
    author="Certificate Registry Team",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["shared*", "customers*"]),
    py_modules=["config"],
    python_requires=">=3.11",
    install_requires=[
        "fastapi",
        "uvicorn[standard]",
        "pydantic",
        "sqlalchemy",
        "reportlab",
        "requests",
        "faker",
    ],
    extras_require={
        "postgres": [
            "psycopg2-binary",
        ],
        "test": [
            "pytest",
            "pytest-cov",
            "httpx",
        ],
        "dev": [
            "black",
            "flake8",
            "mypy",
            "pre-commit",
        ],
    },
    entry_points={
        "console_scripts": [
            "registry-api=customers.entrypoints.customer_api:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.11",
        "Topic :: Office/Business",
    ],
)
