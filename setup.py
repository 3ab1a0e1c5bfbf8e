from setuptools import setup, find_packages

setup(
    name="recordkeeper",
    version="0.1.0",
    description="In-memory keyed repositories for tasks, inventory and visitor records",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        "pydantic>=2.0",
        "pydantic-settings>=2.0",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-cov",
        ],
    },
)
