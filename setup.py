"""
Setup.py script for cowbigint
"""
from setuptools import setup, find_packages

PKG_EXCLUDES = ('*.test', '*.test.*', 'test', 'test.*')

setup(
    name='cowbigint',
    version='0.1.0',
    description='Arbitrary-precision integers on copy-on-write limb storage',

    license='MIT',

    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Topic :: Scientific/Engineering :: Mathematics',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
    ],
    keywords='bigint arbitrary-precision integer',

    packages=find_packages(exclude=PKG_EXCLUDES),
    python_requires='>=3.8',

    install_requires=['py'],
    extras_require={
        'test': ['pytest>=8'],
    },
)
