from setuptools import setup, find_packages

setup(
    name="recruitment-intake",
    version="0.1.0",
    packages=find_packages("src"),
    package_dir={"": "src"},
    install_requires=[
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        "python-dotenv>=0.19.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    python_requires=">=3.9",
    author="Christo Strydom",
    author_email="christo.strydom@gmail.com",
    description="Heuristic parser for recruiter job postings and candidate profiles",
    entry_points={
        "console_scripts": [
            "intake-parse=intake.cli:main",
        ],
    },
)
