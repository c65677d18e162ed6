import re
from setuptools import setup, find_packages

with open('requirements.txt') as rf:
    requirements = rf.readlines()

with open('skdecode/__init__.py') as f:
    VERSION = re.search(r"__version__ = '(.+)'", f.read()).group(1)


def readme():
    with open('README.rst') as f:
        return f.read()

setup(
    name='skdecode',
    version=VERSION,
    description='Feature transformation and correlation classification ' \
                'for multivariate pattern analysis.',
    long_description=readme(),
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Science/Research',
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering :: Bio-Informatics'],
    keywords="fMRI MVPA decoding correlation classifier PCA",
    author='Lukas Snoek',
    author_email='lukassnoek@gmail.com',
    license='BSD',
    platforms='Linux',
    packages=find_packages(),
    install_requires=requirements,
    extras_require={'test': ['pytest']},
    include_package_data=True,
    zip_safe=False)
