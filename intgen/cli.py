"""Command-line entry point for generating the integral artifacts."""

import argparse
import logging
import os
import sys
from typing import List, Optional

from .config import GeneratorConfig, parse_config_file
from .families import FAMILIES
from .generator import generate_all


def setup_logging(config: GeneratorConfig) -> None:
	if not os.path.exists(config.log_dir):
		os.makedirs(config.log_dir)
	logging.basicConfig(
		filename=os.path.join(config.log_dir, "intgen.log"),
		level=getattr(logging, config.log_level),
		format="%(asctime)s - %(levelname)s - %(message)s",
	)


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(
		description="Generate Fortran source for nuclear attraction, kinetic energy and momentum integrals."
	)
	parser.add_argument(
		"families",
		nargs="*",
		help=f"Integral families to generate, any of {list(FAMILIES.keys())} (default: all)",
	)
	parser.add_argument("--output-dir", help="Directory for the generated files")
	parser.add_argument("--config", help="Path to a key = value configuration file")
	parser.add_argument("--workers", type=int, help="Processes used per family")
	parser.add_argument("--no-boys", action="store_true", help="Skip the gamma and approx files")
	return parser


def main(argv: Optional[List[str]] = None) -> int:
	parser = build_parser()
	args = parser.parse_args(argv)

	try:
		config = parse_config_file(args.config) if args.config else GeneratorConfig()
		config = config.updated(
			families=args.families or None,
			output_dir=args.output_dir,
			workers=args.workers,
			boys=False if args.no_boys else None,
		)

		setup_logging(config)
		logging.info(f"Generating families {config.families} into {config.output_dir}")

		paths = generate_all(config)

		for path in paths:
			print(f"Wrote {path}")

	except Exception as e:
		print(f"Error: {str(e)}", file=sys.stderr)
		sys.exit(1)

	return 0
