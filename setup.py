"""
Negotiator
==========

HTTP content negotiation for the Accept-Charset header.
"""
from setuptools import setup, find_packages

extras_require = {
    'test': [
        'pytest',
    ],
}

setup(
    name='negotiator',
    version='0.1.0',
    license='BSD',
    author='Ben Mather',
    author_email='bwhmather@bwhmather.com',
    description='HTTP content negotiation for the Accept-Charset header',
    long_description=__doc__,
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Web Environment',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Internet :: WWW/HTTP',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
    platforms='any',
    install_requires=[
        'werkzeug >= 2.0',
    ],
    extras_require=extras_require,
    packages=find_packages(),
    include_package_data=True,
)
