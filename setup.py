"""
icalx: module for reading iCalendar files

Description
-----------

Parses iCalendar (RFC 5545) text into plain Python data structures: a
calendar holding events, to-dos, journals, free/busy blocks, time zones and
alarms. Durations and recurrence rules are parsed into structured values.
Malformed input raises a typed error naming the offending line, component and
property.

Requirements
------------

Requires python 3.8 or later and dateutil 2.7.0 or later.

Recent changes
--------------
    - Unknown properties can be kept as extensions with strict=False
    - FREEBUSY periods may end with a duration
"""

from setuptools import setup, find_packages

doclines = (__doc__ or '').splitlines()

setup(name = "icalx",
      version = "1.0.0",
      license = "Apache",
      zip_safe = True,
      include_package_data = True,
      python_requires = ">=3.8",
      install_requires=["python-dateutil >= 2.7.0"],
      extras_require = {
          "test": ["pytest"],
      },
      platforms = ["any"],
      packages = find_packages(exclude=["tests", "tests.*"]),
      description = "A strict Python package for parsing iCalendar files",
      long_description = "\n".join(doclines[2:]),
      keywords = ['icalendar', 'ics', 'rfc5545', 'rrule'],
      classifiers =  """
      Development Status :: 4 - Beta
      Intended Audience :: Developers
      License :: OSI Approved :: Apache Software License
      Natural Language :: English
      Operating System :: OS Independent
      Programming Language :: Python
      Programming Language :: Python :: 3
      Topic :: Text Processing""".strip().splitlines()
      )
