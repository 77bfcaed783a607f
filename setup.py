#!/usr/bin/python3

from setuptools import setup


with open("README.md", "r") as f:
    long_description = f.read()


setup(name='raidcalc',
      version='1.0.0',
      description='Python module for modeling RAID array capacity, redundancy and rebuild risk',
      long_description=long_description,
      long_description_content_type="text/markdown",
      author='raidcalc authors',
      packages=['raidcalc', 'raidcalc.devicelibs'],
      install_requires=[],
      extras_require={"test": ["pytest"]},
      python_requires='>=3.6',
      classifiers=["Development Status :: 5 - Production/Stable",
                   "Intended Audience :: Developers",
                   "Intended Audience :: System Administrators",
                   "License :: OSI Approved :: GNU General Public License v2 or later (GPLv2+)",
                   "Programming Language :: Python :: 3",
                   "Topic :: System :: Hardware"]
     )
