"""hilbertfrac setup"""
from setuptools import setup, find_packages

setup(
    name='hilbertfrac',
    version='0.1.0',
    description='Hilbert-order quadrant resolution of binary fractions',
    author='aharttn',
    packages=find_packages(where='src'),
    package_dir={'': 'src'},
    install_requires=[
        'numpy>=1.24',
        'tqdm>=4.65',
        'pydantic>=2.0',
        'pydantic-settings>=2.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'hilbertfrac=hilbertfrac.cli.__main__:main',
        ],
    },
    python_requires='>=3.9',
)
