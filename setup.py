from setuptools import setup, find_packages

setup(
    name='gardenctl',
    version='0.1.0',
    packages=find_packages(),
    include_package_data=True,
    install_requires=[
        'typer[all]',
        'kubernetes',
        'PyYAML',
        'jsonschema',
        'python-dotenv',
        'urllib3',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'gardenctl=gardenctl.cli:main'
        ]
    },
    author='Your Name',
    description='Registry of Garden clusters and target pattern matching for gardenctl',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.8',
)
