import setuptools

with open ('README.md','r') as fh:
    long_description = fh.read()

install_requires = ['requests>=2.31',
                    'pandas>=2.0',
                    'beautifulsoup4>=4.12',
                    'python-dateutil>=2.8']

extras_require = {'test':['pytest>=7.0']}

setuptools.setup(
	name='wikicells',
	version = '0.1.0',
    description = "Spreadsheet functions that turn Wikipedia, Wikidata and Wikimedia statistics into tables.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    install_requires=install_requires,
    extras_require=extras_require,
    packages=setuptools.find_packages(exclude=['tests']),
    python_requires='>=3.8',
    classifiers=[
    "Programming Language :: Python :: 3",
    "License :: OSI Approved :: MIT License"]
)

# To setup for development:
#> pip install -e .[test]

# To run the tests:
#> pytest tests
