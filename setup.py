from setuptools import setup, find_packages

import os

# Read version from version.py
version_ns = {}
with open(os.path.join("cf_geolocation", "version.py")) as f:
    exec(f.read(), version_ns)

setup(
    name='cf-geolocation',
    version=version_ns['__version__'],
    packages=find_packages(exclude=['tests', 'tests.*']),
    include_package_data=True,
    python_requires='>=3.9',
    install_requires=[
        'Flask',
        'Werkzeug',
        'geoip2',
        'maxminddb',
        'pytz',
    ],
    extras_require={
        'test': [
            'pytest',
            'mmdb-writer',
            'netaddr',
        ],
    },
    entry_points={
        'console_scripts': [
            'cf-geolocation=cf_geolocation.app:main',
            'cf-geolocation-prestart=cf_geolocation.prestart:prestart',
        ],
    },
)
