from setuptools import setup
from setuptools import find_packages

long_description = open('README.md').read()

setup(
    name="rfcuri",
    version='0.1.0',
    description="RFC 3986 URI model, normalization and reference resolution",
    install_requires=[
        'dnspython',
        'lark',
    ],
    extras_require={
        'tests': [
            'pytest',
        ],
    },
    packages=find_packages(exclude=['tests', 'tests.*']),
    include_package_data=True,
    package_data={'rfcuri': ['*.ini']},
    long_description=long_description,
    long_description_content_type='text/markdown'
)
