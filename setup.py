from setuptools import setup, find_packages

setup(
    name="license-info-resolver",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "license-expression",
        "typer",
    ],
    extras_require={
        "dev": [
            "pytest",
            "pytest-cov",
            "pytest-mock",
            "mypy",
            "black",
        ],
    },
    entry_points={
        "console_scripts": [
            "license-info-resolver=license_info_resolver.cli.main_cli:app",
        ],
    },
    author="Damian Vicino",
    author_email="damian.vicino@datadoghq.com",
    description="Resolves the licenses and copyrights of software components from their license evidence",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    url="https://github.com/DataDog/license-info-resolver",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)
