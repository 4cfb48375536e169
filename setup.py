#!/usr/bin/env python
import logging
from pathlib import Path

from setuptools import find_packages, setup

DEPENDENCIES = {
    'numpy': [],
    'pyproj': [],
    'python-dateutil': [],
    'pyyaml': [],
    'typepigeon>=2': [],
    'typer': [],
}

try:
    from dunamai import Version

    version = Version.from_any_vcs().serialize()
except (ImportError, RuntimeError) as error:
    logging.warning(f'{error.__class__.__name__} - {error}')
    version = '0.0.0'

logging.info(f'using version {version}')

README = Path(__file__).parent / 'README.md'

setup(
    name='aprsreport',
    version=version,
    description='decode APRS position reports',
    long_description=README.read_text() if README.exists() else '',
    long_description_content_type='text/markdown',
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.8',
    install_requires=list(DEPENDENCIES),
    extras_require={
        'testing': ['aprslib', 'pytest', 'pytest-cov', 'pytest-xdist'],
        'development': ['dunamai', 'flake8', 'isort', 'oitnb', 'wheel'],
    },
    entry_points={'console_scripts': ['aprsreport=aprsreport.__main__:main']},
)
