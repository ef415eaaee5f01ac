# Usage: python setup.py bdist_wheel

import setuptools  # type: ignore

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name='norlogic',
    version='0.1',
    author="norlogic contributors",
    description="NOR-based Boolean normal forms and knowledge-base simplification",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(
        include=['norlogic', 'norlogic.*']
    ),
    python_requires='>=3.11',
    install_requires=[
        'sympy',
        'IPython',
        'typing_extensions'
    ],
    extras_require={
        'test': ['pytest']
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: BSD-2-Clause",
        "Operating System :: OS Independent",
    ],
)
