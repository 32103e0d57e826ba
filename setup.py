import setuptools

setuptools.setup(
	name='vrscene-parse',
	version='0.1.0',
	packages=[
		'vrscene',
		'vrscene.parsing',
		'vrscene.scanning',
		'vrscene.support',
	],
	description='A recursive-descent reader for .vrscene scene description files',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	python_requires='>=3.9',
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Multimedia :: Graphics :: 3D Rendering",
		"Topic :: Text Processing",
		"Development Status :: 3 - Alpha",
	],
)
