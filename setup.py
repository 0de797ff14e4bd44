# setup.py
from setuptools import find_namespace_packages, setup

setup(
    name="webpack4py",
    version="0.1.0",
    description="Per-site webpack configuration and compiled-asset manifest resolution",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["webpack4py", "webpack4py.*"]),
    python_requires=">=3.9",
    install_requires=[
        "requests",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'webpack4py=webpack4py.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
