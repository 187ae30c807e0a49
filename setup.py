from setuptools import setup, find_packages

__version__ = '1.0.0'

requirements = [
    'coloredlogs',
    'sanic',
]

test_requirements = [
    'pytest',
    'sanic-testing',
]

setup(
    name='custody',
    version=__version__,
    description='Authorization and ownership transfer registry for a single asset.',
    packages=find_packages(include=['custody', 'custody.*']),
    install_requires=requirements,
    extras_require={
        'test': test_requirements,
    },
    classifiers=[
        'Programming Language :: Python :: 3',
    ],
    python_requires='>=3.8',
    zip_safe=True,
    include_package_data=True,
)
