# coding: utf-8
from setuptools import setup, find_packages
from codecs import open
from os import path
import re
import sys

here = path.abspath(path.dirname(__file__))

with open(path.join(here, "mdtag", "__init__.py"), encoding="utf-8") as init_file:
	mdtag_version = re.search(r'^__version__ = "([^"]+)"', init_file.read(), re.M).group(1)

with open(path.join(here, "DESCRIPTION.md"), encoding="utf-8") as description:
	description = long_description = description.read()

	name="mdtag"
	version = mdtag_version

	if sys.version_info.major != 3:
		raise EnvironmentError("""{toolname} is a python module that requires python3, and is not compatible with python2.""".format(toolname=name))

	setup(
		name=name,
		version=version,
		description="Codec for the SAM MD alignment-mismatch tag",
		long_description=long_description,
		long_description_content_type="text/markdown",
		license="MIT",
		classifiers=[
			"Development Status :: 4 - Beta",
			"Topic :: Scientific/Engineering :: Bio-Informatics",
			"License :: OSI Approved :: MIT License",
			"Operating System :: POSIX :: Linux",
			"Programming Language :: Python :: 3.10"
		],
		zip_safe=False,
		keywords="sam bam md tag cigar alignment mismatch reference",
		packages=find_packages(exclude=["tests", "tests.*"]),
		python_requires=">=3.10",
		install_requires=[
			"intervaltree",
			"pysam",
		],
		extras_require={
			"test": ["pytest"],
		},
		entry_points={
			"console_scripts": [
				"mdtag=mdtag.__main__:main",
			],
		},
		package_data={},
		include_package_data=True,
		data_files=[],
	)
