#!/usr/bin/env python

from setuptools import setup, find_packages
import os

setup(name='oauth1-flow',
      version='2.0.0',
      description='Sign requests and run the three-legged OAuth 1.0 flow',
      author='Andrii Kurinnyi',
      author_email='andrew@zen4ever.com',
      url='https://github.com/zen4ever/oauth-flow',
      packages=find_packages(exclude=['tests', 'tests.*']),
      keywords=['oauth', 'oauth1', 'twitter', 'tumblr'],
      classifiers=[
          'Development Status :: 4 - Beta',
          'Programming Language :: Python',
          'Programming Language :: Python :: 3',
          'Intended Audience :: Developers',
          'License :: OSI Approved :: MIT License',
          'Operating System :: OS Independent',
      ],
      python_requires='>=3.7',
      install_requires=['httplib2'],
      extras_require={'test': ['pytest']},
      long_description=open(
          os.path.join(os.path.dirname(__file__), 'README.rst'),
      ).read().strip(),
)
