from setuptools import setup, find_packages

setup(
    name="merged-prs",
    version="1.0.0",
    description="List your closed pull requests in other people's GitHub repositories",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "requests>=2.31.0",
        "rich>=13.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "merged-prs=merged_prs.cli:main",
        ],
    },
)
