from setuptools import setup, find_packages

setup(
    name="match-json",
    version="0.1.0",
    description="Convert match-result XML responses to JSON with a computed total match score",
    author="Your Name",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "xmltodict>=0.13",
        "structlog>=23.1",
        "pydantic>=2.0",
        "pydantic-settings>=2.0",
        "pyyaml>=6.0",
        "typer>=0.9",
        "rich>=13.0",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
        ],
    },
    entry_points={
        "console_scripts": [
            "match-json=match_json.cli:app"
        ]
    },
    python_requires=">=3.8",
    include_package_data=True,
)
