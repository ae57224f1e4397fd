import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

with open('VERSION', 'r') as fh:
    VERSION = fh.read().strip()

setuptools.setup(
    name="bootup",
    version=VERSION,
    description="Server setup tool - install common server apps and tools from an interactive terminal browser",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=['bootup', 'bootup.*']),
    classifiers=[
        "Programming Language :: Python :: 3.12",
        "Environment :: Console :: Curses",
        "Operating System :: POSIX :: Linux",
    ],
    python_requires='>=3.12',
    install_requires=[
        'pydantic>=2.0',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'bootup=bootup:run_as_a_module',
        ],
    },
)
