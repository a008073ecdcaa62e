#!/usr/bin/python3
# -*- coding: utf-8 -*-

from setuptools import setup, find_packages
import os

ROOT = os.path.abspath(os.path.dirname(__file__))

with open(os.path.join(ROOT, 'README.md'), 'r', encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='steamtoolbox',
    include_package_data=True,
    version='1.0.0',  # Ideally should be same as your GitHub release tag version
    packages=find_packages(include=['steamtoolbox', 'steamtoolbox.*']),
    description='steamtoolbox - A collection of Steam & Water Engineering Utilities',
    long_description=long_description,
    long_description_content_type='text/markdown',
    author='The steamtoolbox authors',
    keywords=['steam', 'iapws', 'if97', 'boiler', 'condenser'],
    classifiers=[],
    python_requires='>=3.8',
    install_requires=[
        'numpy',
        'scipy',
        'pandas',
        'tabulate',
        'openpyxl'
    ],
    extras_require={
        'test': ['pytest']
    }
)
