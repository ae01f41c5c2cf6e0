from setuptools import find_packages, setup

setup(
    name="translation-tables",
    version="0.1.0",
    packages=find_packages("src"),
    package_dir={"": "src"},
    python_requires=">=3.10",
    install_requires=[
        "python-dotenv",
        "pandas",
        "openpyxl",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
