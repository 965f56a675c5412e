from setuptools import setup

setup(
    name='pybufferio',
    version='0.1.0',
    packages=['bufferio', 'bufferio._hl'],
    license='GNU General Public License v3 (GPLv3)',
    description='Fixed-capacity seekable byte buffer with fixed-layout binary encoding',
    install_requires=[
        'numpy>=1.17.0'
    ]
)
