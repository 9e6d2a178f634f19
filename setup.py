from setuptools import setup, find_namespace_packages

setup(
    name="book_manager",
    version="0.1.0",
    packages=find_namespace_packages(include=['cli*', 'core*']),
    include_package_data=True,
    python_requires=">=3.11",
    install_requires=[
        "Click",
        "SQLAlchemy>=2.0",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "book-manager=cli.main:main",
        ],
    },
)
