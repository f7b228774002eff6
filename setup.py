# setup.py
# setup script for extrema

import setuptools

with open("README.md", "r") as f:
    long_description = f.read()

install_requires = [
    'numpy',
]

setuptools.setup(
    name="extrema",
    version="0.1.0",
    author="aoLab",
    author_email="aorsborn@uw.edu",
    description="single-pass minimum and maximum of any iterable",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_namespace_packages(include=['extrema', 'extrema.*']),
    include_package_data=True,
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent"
    ],
    install_requires=install_requires,
    extras_require={
        'test': ['pytest'],
    },
)
