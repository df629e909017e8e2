# -*- coding: utf-8 -*-
#
# Copyright (c), 2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
from setuptools import setup, find_packages

with open("README.rst") as readme:
    long_description = readme.read()

setup(
    name='xpath-helper',
    version='1.0.0',
    packages=find_packages(include=['xpathhelper', 'xpathhelper.*']),
    package_data={
        'xpathhelper': ['py.typed'],
    },
    author='Davide Brunato',
    author_email='brunato@sissa.it',
    keywords=['XPath', 'namespace', 'default namespace', 'lxml', 'ElementTree'],
    license='MIT',
    description='Rewrites XPath expressions for XML documents with a default namespace',
    long_description=long_description,
    python_requires='>=3.8',
    extras_require={
        'dev': ['tox', 'coverage', 'lxml', 'elementpath>=4.0.0',
                'flake8', 'mypy']
    },
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'Intended Audience :: Information Technology',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: 3.13',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Topic :: Software Development :: Libraries',
        'Topic :: Text Processing :: Markup :: XML',
    ]
)
