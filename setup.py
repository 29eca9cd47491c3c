from setuptools import setup

setup(
    name='pyawc',
    version='0.1.0',
    packages=['pyawc', 'pyawc.models'],
    package_dir={'': 'src'},
    keywords=['weather', 'metar', 'aviation'],
    classifiers=[],
    license='Apache',
    python_requires='>=3.9',
    install_requires=[
        'defusedxml',
        'httpx',
        'pydantic>=2',
    ],
    extras_require={
        'test': ['mock', 'pytest'],
    },
    description=('Client for the Aviation Weather Center Text Data Server '
                 'METAR service.'),
)
