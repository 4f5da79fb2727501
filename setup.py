"""
Setup configuration for chemnet package.
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README
readme_path = Path(__file__).parent / 'README.md'
long_description = readme_path.read_text() if readme_path.exists() else ''

setup(
    name='chemnet',
    version='1.0.0',
    description='Toy chemical process network: mass-flow streams, mixers and reactors',
    long_description=long_description,
    long_description_content_type='text/markdown',
    author='Process Simulation Team',

    packages=find_packages(exclude=['tests', 'tests.*', 'configs']),
    package_data={
        'chemnet.config': ['schemas/*.json'],
    },

    install_requires=[
        'numpy>=1.21.0',
        'pyyaml>=6.0',
        'jsonschema>=4.0.0',
    ],

    extras_require={
        'dev': [
            'pytest>=7.0.0',
            'pytest-cov>=3.0.0',
            'mypy>=0.990',
            'black>=22.0.0',
            'flake8>=5.0.0',
        ],
    },

    entry_points={
        'console_scripts': [
            'chemnet-run=chemnet.simulation.runner:main',
        ],
    },

    python_requires='>=3.10',

    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Education',
        'Topic :: Scientific/Engineering',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],
)
