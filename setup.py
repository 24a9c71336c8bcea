# setup.py
from setuptools import setup, find_packages

setup(
    name="sofidu",
    version="0.3.0",
    description="Concurrent disk-usage analyzer that renders directory sizes as a tree or a list",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "rich",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'sofidu=sofidu.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: POSIX",
        "Environment :: Console",
    ],
)
