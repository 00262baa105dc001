#!/usr/bin/env python3
"""
Main script for generating the integral Fortran source files.
"""

from intgen.cli import main

if __name__ == "__main__":
	main()
