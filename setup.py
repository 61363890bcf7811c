"""Setup file and install script for vqtranche.

Copyright (C) 2019 Shujia Huang <huangshujia9@gmail.com>
"""
import os
import re

from setuptools import setup, find_packages

DESCRIPTION = "vqtranche: FDR tranche selection for recalibrated variant calls."
DISTNAME = 'vqtranche'
MAINTAINER = 'Shujia Huang & Siyang Liu'
MAINTAINER_EMAIL = 'huangshujia9@gmail.com'
URL = 'https://pypi.org/project/vqtranche'
DOWNLOAD_URL = 'https://pypi.org/project/vqtranche'
LICENSE = 'BSD (3-clause)'

ROOT_DIR = os.path.split(os.path.realpath(__file__))[0]


def get_version():
    try:
        f = open(ROOT_DIR + "/vqtranche/_version.py")
    except EnvironmentError:
        return None

    with f:
        for line in f.readlines():
            mo = re.match("__version__ = '([^']+)'", line)
            if mo:
                return mo.group(1)

    return None


if __name__ == "__main__":

    setup(
        name=DISTNAME,
        version=get_version(),
        author=MAINTAINER,
        author_email=MAINTAINER_EMAIL,
        maintainer=MAINTAINER,
        maintainer_email=MAINTAINER_EMAIL,
        description=DESCRIPTION,
        long_description=(open(ROOT_DIR + "/README.rst").read()),
        license=LICENSE,
        url=URL,
        download_url=DOWNLOAD_URL,
        packages=find_packages(exclude=['tests', 'tests.*']),
        include_package_data=True,
        python_requires='>=3.7',
        install_requires=[
            'Logbook>=1.4.3',
            'numpy>=1.15.4',
        ],
        extras_require={
            'test': ['pytest>=4.0'],
        },
        classifiers=[
            'Intended Audience :: Science/Research',
            'Programming Language :: Python :: 3',
            'License :: OSI Approved :: BSD License',
            'Topic :: Scientific/Engineering :: Bio-Informatics',
            'Operating System :: POSIX',
            'Operating System :: POSIX :: Linux',
            'Operating System :: MacOS']
    )
