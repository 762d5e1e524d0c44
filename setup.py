###################
# Install NQueens #
###################

import setuptools

long_description = ('NQueens enumerates every placement of N mutually '
                    'non-attacking queens on an NxN board by exhaustive '
                    'row-by-row backtracking, with a Z3-based solver for '
                    'cross-checking the results.')

setuptools.setup(
    name='nqueens',
    version='1.0.0',
    description='Exhaustive N-Queens enumeration by backtracking',
    long_description=long_description,
    long_description_content_type='text/markdown',
    classifiers=[
        'Topic :: Software Development :: Libraries :: Python Modules',
        'Topic :: Scientific/Engineering :: Mathematics',
        'Development Status :: 2 - Pre-Alpha',
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'Intended Audience :: Developers'],
    keywords=[
        'n-queens',
        'backtracking',
        'constraint satisfaction'],
    python_requires='>=3.8',
    install_requires=[
        'numpy',
        'z3-solver >= 4.8',
    ],
    extras_require={
        'test': ['pytest'],
    },
    packages=setuptools.find_packages(include=['nqueens', 'nqueens.*']),
    scripts=['bin/nqueens'])
