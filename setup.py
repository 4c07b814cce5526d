from setuptools import setup

setup(
    name='pybinfile',
    version='0.1.0',
    packages=['binfile', 'binfile._hl'],
    license='GNU General Public License v3 (GPLv3)',
    author='gsicard',
    description='Binary files with magic numbers and versioning',
    python_requires='>=3.7',
    install_requires=[
        'numpy>=1.12.0'
    ]
)
