# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from setuptools import setup, find_packages

setup(
    name='ringcoll',
    version='0.1.0',
    packages=find_packages(include=['ringcoll', 'ringcoll.*']),
    entry_points={
        'console_scripts': [
            'ringcoll = ringcoll.__main__:main',
        ],
    },
    install_requires=[
        'argcomplete',
        'humanfriendly',
        'tabulate',
    ],
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.7',
)
