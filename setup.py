# setup.py
from setuptools import setup, find_packages

setup(
    name="dirshortcuts",
    version="0.1.0",
    description="Generate a sourceable bash script of shortcuts for a directory tree",
    package_dir={"": "src"},
    packages=find_packages(where="src"),  # Finds 'dirshortcuts' and its subpackages under src/
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'dirshortcuts=dirshortcuts.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: POSIX",
        "Environment :: Console",
    ],
)
