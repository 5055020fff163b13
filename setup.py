#!/usr/bin/env python3

from setuptools import setup

setup(
    name='passgen',
    version='0.1.0',
    description='Random password generator with entropy-based strength estimate',
    packages=['passgen', 'passgen.backend'],
    python_requires='>=3.7',
    install_requires=[
        'prompt_toolkit>=3.0',
        'blessed',
        'pyperclip',
    ],
    extras_require={
        'pynacl': ['pynacl'],
        'test': ['pytest', 'pynacl'],
    },
    entry_points={
        'console_scripts': [
            'passgen = passgen.main:main',
        ],
    },
)
