#!/usr/bin/env python
#
# Copyright (c) 2026 Endianio Developers
#
# This software is distributed under the terms of the MIT License.
#

import os
from setuptools import setup

__version__ = None
VERSION_FILE = os.path.join(os.path.dirname(__file__), 'endianio', '_version.py')
exec(open(VERSION_FILE).read())         # Adds __version__ to globals

with open('README.md', 'r') as fh:
    long_description = fh.read()

args = dict(
    name='endianio',
    version=__version__,
    description='Endianness-explicit encoding and decoding of fixed-width numeric primitives over byte streams.',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=[
        'endianio',
    ],
    python_requires='>=3.8',
    install_requires=[
        'numpy >= 1.20',
    ],
    extras_require={
        'testing': [
            'pytest   >= 7.1',
            'coverage >= 6.3',
        ],
    },
    author='Endianio Developers',
    license='MIT',
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'Topic :: Software Development :: Libraries',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ],
    keywords='binary codec endianness byte order serialization magic number'
)

setup(**args)
