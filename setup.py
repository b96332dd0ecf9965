# setup.py
from setuptools import find_packages, setup

setup(
    name="krishi-sadhan",
    version="0.1.0",
    description="Farm equipment rental and purchase API",
    packages=find_packages(include=["app", "app.*"]),
    include_package_data=True,
    python_requires=">=3.11",
    install_requires=[
        "fastapi>=0.110",
        "uvicorn[standard]>=0.29",
        "pydantic>=2.6",
        "pydantic-settings>=2.2",
        "sqlalchemy[asyncio]>=2.0",
        "asyncpg>=0.29",
        "psycopg[binary]>=3.1",
        "alembic>=1.13",
        "structlog>=24.1",
        "sentry-sdk>=2.0",
        "slowapi>=0.1.9",
        "limits>=3.10",
        "python-dotenv>=1.0",
        "werkzeug>=3.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
            "httpx>=0.27",
            "aiosqlite>=0.20",
        ],
    },
)
