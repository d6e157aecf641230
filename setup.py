from setuptools import setup, find_packages

setup\
    ( name = 'formtypes'
    , version = '0.1.0'
    , description = 'culture aware type conversion, validation conditions and calculations for form data'
    , long_description = open('README.txt').read()
    , classifiers =\
        [ "Development Status :: 4 - Beta"
        , "Topic :: Software Development :: Libraries :: Python Modules"
        , "License :: Public Domain"
        , "Programming Language :: Python :: 3"
        , 'Intended Audience :: Developers'
        ]
    , license = 'Unlicense'
    , keywords = 'validation conversion form culture typemanager condition'

    , packages = find_packages('src')
    , package_dir = {'':'src'}
    , python_requires = '>=3.8'
    , install_requires = [ ]
    , extras_require = { 'test': [ 'pytest' ] }
    , include_package_data = True
    )
