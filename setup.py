from setuptools import find_packages, setup

setup(
	name="intgen",
	version="0.1.0",
	packages=find_packages(exclude=["tests", "tests.*"]),
	install_requires=[
		"numpy>=1.21.0",
		"scipy>=1.7.0",
	],
	extras_require={
		"dev": [
			"pytest>=7.0.0",
		],
	},
	entry_points={
		"console_scripts": [
			"intgen=intgen.cli:main",
		],
	},
	author="Justin Kirkland",
	description="Generator of closed-form Gaussian integral formulas as Fortran source",
	python_requires=">=3.7",
)
