"""Setup script for dfr_xsec package."""

from setuptools import setup, find_packages

setup(
    name='dfr_xsec',
    version='1.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    package_data={'dfr_xsec.config': ['defaults.yaml']},
    python_requires='>=3.9',
    install_requires=[
        'numpy>=1.20.0',
        'scipy>=1.9.0',
        'PyYAML>=5.4',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
)
