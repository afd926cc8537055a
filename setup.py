#!/usr/bin/env python

import os
from setuptools import setup, find_packages

ver_dic = {}
version_file = open("everybit/version.py")
try:
    version_file_contents = version_file.read()
finally:
    version_file.close()

os.environ["AKPYTHON_EXEC_IMPORT_UNAVAILABLE"] = "1"
exec(compile(version_file_contents, "everybit/version.py", "exec"), ver_dic)


setup(name="everybit",
      version=ver_dic["VERSION_TEXT"],
      description="Euclidean signed modulo and packed bit array rotation",
      long_description=open("README.rst").read(),
      classifiers=[
          "Development Status :: 4 - Beta",
          "Intended Audience :: Developers",
          "Intended Audience :: Education",
          "License :: OSI Approved :: MIT License",
          "Natural Language :: English",
          "Programming Language :: Python",
          "Programming Language :: Python :: 3",
          "Topic :: Scientific/Engineering :: Mathematics",
          "Topic :: Software Development :: Libraries",
          "Topic :: Utilities",
          ],

      python_requires="~=3.8",
      install_requires=[
          "pytools>=2023.1.1",

          # packbits/unpackbits bitorder
          "numpy>=1.19",

          "colorama",
          ],

      extras_require={
          "test": [
              "pytest",
              ],
          },

      scripts=["bin/everybit"],

      author="Derek Rhodes",
      license="MIT",
      packages=find_packages(include=["everybit", "everybit.*"]),
      )
