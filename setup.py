from setuptools import setup

setup(
    name='multivector',
    version='0.0.1',
    description='Linearized multi-dimensional arrays with zero-copy views',
    author='multivector contributors',
    license='MIT',
    packages=['multivector'],
    python_requires='>=3.10',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
)
