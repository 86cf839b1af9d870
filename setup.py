from setuptools import find_packages, setup

setup(
    name='symcalc',
    version='0.1',
    packages=find_packages(include=['symcalc', 'symcalc.*']),
    description='Symbolic evaluation, differentiation and simplification of single-variable expressions',
    python_requires='>=3.11',
    install_requires=[
        'sympy>=1.13',
    ],
    extras_require={
        'test': [
            'pytest>=8.0',
        ],
    },
)
