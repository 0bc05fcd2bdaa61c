#!/usr/bin/env python
# -*- encoding: utf-8 -*-
"""Setup dot py."""
import re
from os.path import dirname, join

from setuptools import find_packages, setup


def read(*names, **kwargs):
    """Read description files."""
    path = join(dirname(__file__), *names)
    with open(path, encoding=kwargs.get('encoding', 'utf8')) as fh:
        return fh.read()


long_description = '{}\n{}'.format(
    read('README.rst'),
    re.sub(':[a-z]+:`~?(.*?)`', r'``\1``', read(join('CHANGELOG.rst')))
    )

setup(
    name='fetchpdb',
    version='0.1.0',
    description='Downloads PDB and mmCIF files from the wwPDB FTP mirrors.',
    long_description=long_description,
    long_description_content_type='text/x-rst',
    packages=find_packages('src'),
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        # complete classifier list:
        # http://pypi.python.org/pypi?%3Aaction=list_classifiers
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Science/Research',
        'Natural Language :: English',
        'Operating System :: POSIX',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering :: Bio-Informatics',
        ],
    keywords=[
        'PDB', 'mmCIF', 'wwPDB', 'FTP',
        ],
    python_requires='>=3.8,<4',
    install_requires=[
        ],
    extras_require={
        'test': [
            'pytest',
            'hypothesis',
            ],
        },
    entry_points={
        'console_scripts': [
            'fetchpdb = fetchpdb.cli:maincli',
            ]
        },
    )
