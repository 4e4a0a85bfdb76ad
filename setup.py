"""Setup script for Baby Music mode playlists."""

from setuptools import setup, find_namespace_packages

setup(
    name="babymusic",
    version="0.1.0",
    description="Mode playlists and next-video selection for a baby music player",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[
        "fastapi>=0.100.0",
        "pydantic>=2.0.0",
        "python-dotenv>=1.0.0",
        "sqlalchemy>=2.0.0",
        "uvicorn>=0.23.0",
    ],
    extras_require={
        "test": [
            "httpx>=0.24.0",
            "pytest>=7.0.0",
            "pytest-mock>=3.10.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "babymusic=babymusic.cli:main",
        ]
    },
)
