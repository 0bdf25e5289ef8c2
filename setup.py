from setuptools import setup, find_namespace_packages

setup(
    name="bookshelf",
    version="0.1.0",
    packages=find_namespace_packages(include=['api*', 'cli*', 'core*']),
    include_package_data=True,
    python_requires=">=3.11",
    install_requires=[
        "Click",
        "SQLAlchemy>=2.0",
        "fastapi>=0.110",
        "starlette",
        "pydantic>=2.0",
        "PyJWT>=2.8",
        "uvicorn",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
    },
    entry_points={
        "console_scripts": [
            "bookshelf=cli.main:main",
        ],
    },
)
