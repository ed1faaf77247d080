from setuptools import setup, find_packages

setup(
    name='optional-type',
    version='1.0.5',
    author='songwei',
    author_email='songwei@songwei.io',
    description='Optional container with configurable absence markers',
    long_description='',
    packages=find_packages(exclude=['example', 'example.*']),
    install_requires=[],
    extras_require={
        'test': ['pytest'],
    },
    ext_modules=[],
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
    ],
)
