from setuptools import find_packages, setup

setup(
    name='daily-file-logger',
    packages=find_packages(exclude=['tests', 'tests.*']),
    version='0.1.0',
    description='Per-object logger writing to a daily log file and the console',
    license='MIT',
    python_requires='>=3.8',
    extras_require={
        'test': ['pytest'],
    },
)
