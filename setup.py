"""
Set up package.
Required modules: toolz (basetypes.py), pydantic_core, pydantic (supertypes.py)
Test modules: pytest, hypothesis
"""
from setuptools import setup, find_packages

setup(
    name='combinators',
    version='0.1',
    packages=find_packages(include=['combinators', 'combinators.*']),
    python_requires='>=3.10',
    install_requires=[
        'pydantic_core',
        'pydantic',
        'toolz'
    ],
    extras_require={
        'test': [
            'pytest',
            'hypothesis'
        ],
    },
)
