# SPDX-FileCopyrightText: 2026 Delta Connect Contributors
#
# SPDX-License-Identifier: Apache-2.0

from setuptools import setup

VERSION = "0.1.0"

with open('README.md') as f:
    long_description = f.read()

setup(
    name="delta-connect-client",
    version=VERSION,
    description="Python client for Delta Lake table operations over Spark Connect",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="Apache-2.0",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Programming Language :: Python :: 3",
    ],
    keywords='delta spark-connect',
    package_dir={'': 'python'},
    packages=['delta_connect', 'delta_connect.proto', 'delta_connect.testing'],
    package_data={'delta_connect.proto': ['*.pyi']},
    python_requires='>=3.9',
    install_requires=[
        'pyspark[connect]>=4.0.0',
        'protobuf>=5.28,<6',
        'pyarrow>=11.0.0',
        'colorlog>=6.0',
        'typing_extensions>=4.4',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
)
