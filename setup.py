from setuptools import setup, find_namespace_packages

setup(
    name="evtrack",
    version="0.1.0",
    packages=find_namespace_packages("src"),
    package_dir={'': 'src'},
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "python-dotenv",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
