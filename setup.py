from setuptools import setup, find_packages

setup(
    name='ternarylogic',
    version='0.1.0',
    author='Ternarylogic Contributors',
    description='Three-valued logic: Kleene connectives, resolution and paraconsistent collapse',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    packages=find_packages(exclude=["tests", "tests.*"]),
    license='Apache License 2.0',
    install_requires=[

        'numpy',
        'PyYAML>=6.0',

    ],
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3.12",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.12',
)
