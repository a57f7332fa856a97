from setuptools import setup, find_packages

setup(
    name='ActiveHighstockSeries',
    version='0.1.0',
    include_package_data=True,
    description='Reshapes tabular rows into Highcharts/Highstock series data',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    python_requires='>=3.10',
    install_requires=[
        'numpy',
        'pandas',
        'pydantic>=2',
        'python-dateutil',
        'python-dotenv',
        'tzdata',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
