import setuptools

setuptools.setup(
	name='range-parse',
	version='0.1.0',
	packages=[
		'rangeparse',
	],
	description='Parse range expressions like "1-3,5-8" or "-5--1,0-3" into lists of numbers',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	python_requires='>=3.9',
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Text Processing",
		"Development Status :: 3 - Alpha",
    ],
)
