from pathlib import Path
from setuptools import setup, find_packages

projdir = Path(__file__).parent
readme = (projdir / 'README.md').read_text()

setup(
    name='surf',
    version='0.1.0',
    packages=find_packages(exclude=['tests']),
    description='Parser for surf addresses',
    license='MIT',
    python_requires='>=3.7',
    install_requires=['termcolor'],
    extras_require={
        'dev': ['pytest', 'mypy'],
    },
    entry_points={
        'console_scripts': ['surf=surf.cli:main']
    },
    long_description=readme,
    long_description_content_type='text/markdown',
)
