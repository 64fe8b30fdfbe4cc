"""Setup file for linking-ble."""

import re
from setuptools import setup, find_packages


def parse_version():
    VERSIONFILE = "linking_ble/__version__.py"
    with open(VERSIONFILE, "rt") as infile:
        verstrline = infile.read()

    VSRE = r"^__version__ = ['\"]([^'\"]*)['\"]"
    mo = re.search(VSRE, verstrline, re.M)
    if mo:
        return mo.group(1)

    raise RuntimeError("Unable to find version string in %s." % (VERSIONFILE,))


setup(
    name="linking-ble",
    packages=find_packages(exclude=("test",)),
    version=parse_version(),
    license="LGPLv3",
    install_requires=[
        "typedargs>=1.0.0,<2",
        "typing_extensions>=3.7"
    ],
    extras_require={
        'test': ["pytest>=6"]
    },
    entry_points={
        'console_scripts': [
            'linking-decode = linking_ble.scripts.decode_script:main'
        ]
    },
    python_requires=">=3.7,<4",
    description="Linking beacon advertisement decoder",
    keywords=["linking", "bluetooth", "ble", "beacon", "advertisement"],
    classifiers=[
        "Programming Language :: Python",
        "Development Status :: 5 - Production/Stable",
        "License :: OSI Approved :: GNU Library or Lesser General Public License (LGPL)",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Libraries :: Python Modules"
        ],
    long_description="""\
Linking Beacon Decoder
----------------------

Decodes the manufacturer specific advertisement data broadcast by Linking
bluetooth beacons (temperature, humidity, air pressure, battery, buttons,
opening, human detection and vibration sensors) into typed records.
"""
)
