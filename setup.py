#!/usr/bin/env python

import os
from setuptools import setup, find_packages

README = """
Imports course groups, groupings and group members from csv files.
"""

version_path = 'group_importer/VERSION'
VERSION = open(os.path.join(os.path.dirname(__file__), version_path)).read()
VERSION = VERSION.replace("\n", "")

# allow setup.py to be run from any path
os.chdir(os.path.normpath(os.path.join(os.path.abspath(__file__), os.pardir)))

setup(
    name='Course Group Import',
    version=VERSION,
    packages=find_packages(include=['group_importer', 'group_importer.*']),
    include_package_data=True,
    install_requires=[
        'django~=5.2',
        'uw-django-saml2~=1.8',
        'prometheus-client>=0.7,<1.0',
    ],
    extras_require={
        'test': ['mock', 'pytest', 'pytest-django'],
    },
    license='Apache License, Version 2.0',
    description='An application that imports course groups from csv files',
    long_description=README,
    author="UW-IT Student & Educational Technology Services",
    author_email="aca-it@uw.edu",
    classifiers=[
        'Environment :: Web Environment',
        'Framework :: Django',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
    ],
)
