from setuptools import setup

# install with: pip install -e .

setup(
    name='wordie',
    version='0.1.0',
    packages=['wordie'],
    package_data={
        'wordie': ['dictionary.txt'],
    },
    python_requires='>=3.8',
    install_requires=[
        'click',
        'rich',
        'blinker',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'wordie = wordie.ui:cli',
        ],
    },
)
