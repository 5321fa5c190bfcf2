#!/usr/bin/env python

from setuptools import find_packages, setup

setup(
    name='sparring',
    version='1.0.0',
    description='Draw generation and ratings for British Parliamentary practice debates',
    packages=find_packages(include=['sparring', 'sparring.*']),
    include_package_data=True,
    python_requires='>=3.8',
    install_requires=[
        'Django>=4.2',
        'PuLP>=2.7,<4',
        'openskill>=5.0',
        'sentry-sdk>=1.14',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
            'pytest-django>=4.5',
        ],
    },
    license='MIT License'
)
