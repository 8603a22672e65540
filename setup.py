"""
Setup script for cregions.

Usage:
    pip install -e .           # Editable install
    pip install -e ".[dev]"    # With dev dependencies (pytest)
"""

from setuptools import setup, find_packages


setup(
    name='cregions',
    version='0.1.0',
    description='Regions of the complex plane bounded by lines, rays, segments, circles and arcs',
    python_requires='>=3.8',
    install_requires=['numpy'],
    extras_require={
        'dev': ['pytest'],
    },
    packages=find_packages('src'),
    package_dir={'': 'src'},
)
