from setuptools import setup, find_packages
import bytedump


with open('readme.rst') as f:
    long_description = f.read()


setup(
    name='bytedump',
    description="Display binary files as hexadecimal and ascii",
    long_description=long_description,
    version=bytedump.__version__,
    include_package_data=True,
    packages=find_packages(exclude=["*.test.*", "test"]),
    python_requires='>=3.6',
    extras_require={
        'test': ['pytest', 'hypothesis'],
    },
    entry_points={
        'console_scripts': [
            'bytedump = bytedump.cli.hexdump:hexdump',
        ]
    },
    license='BSD',
    classifiers=[
        'License :: OSI Approved :: BSD License',
        'Development Status :: 3 - Alpha',
        'Environment :: Console',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Topic :: Software Development :: Debuggers',
        'Topic :: Utilities',
    ]
)
