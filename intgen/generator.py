"""
Generation of the integral artifacts.

A run expands every orbital pair of every generation case for each requested
family, renders the raw and re-based assignments and writes one artifact per
family plus the two Boys function companions.
"""

import logging
import multiprocessing as mp
import os
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

import numpy as np

from .boys import closed_forms, series_approximation
from .cases import GENERATION_CASES, GenerationCase, case_for_switch
from .config import GeneratorConfig
from .families import IntegralFamily, get_family
from .writer import FORTRAN90, OutputDialect, render_switch, wrap_line, write_text

BOYS_OUTPUT = "gamma"
SERIES_OUTPUT = "approx"


@dataclass
class CaseResult:
	"""
	Rendered text of one family for one generation case.

	Attributes:
		family: Family name
		case: The generation case
		raw_entries: Unwrapped raw assignments, axis outermost then orbital 2
		rebased: Re-based assignments, basis index 2 outermost
	"""

	family: str
	case: GenerationCase
	raw_entries: List[str]
	rebased: List[str]


def expand_pair(
	family: IntegralFamily,
	orbital1: int,
	orbital2: int,
	axis: Optional[int] = None,
	dialect: OutputDialect = FORTRAN90,
) -> str:
	"""Unwrapped assignment ``wo(o1,o2) = <expression>`` for one orbital pair."""
	expression = family.expand(orbital1, orbital2, axis)
	return dialect.assign(family.raw_label(orbital1, orbital2, axis), expression.render())


def generate_case(family: IntegralFamily, case: GenerationCase, dialect: OutputDialect = FORTRAN90) -> CaseResult:
	"""
	Expand and render one generation case.

	Args:
		family: Integral family to generate
		case: Generation case giving the raw and basis dimensions
		dialect: Output syntax

	Returns:
		CaseResult with n1*n2 raw entries per axis and b1*b2 re-based lines
	"""
	n1, n2 = case.raw_dims
	b1, b2 = case.basis_dims
	logging.debug(f"Generating {family.name} case {case.label} (switch {case.switch_code})")

	raw_entries = [
		expand_pair(family, orbital1, orbital2, axis, dialect)
		for axis in family.axes
		for orbital2 in range(1, n2 + 1)
		for orbital1 in range(1, n1 + 1)
	]

	index = dialect.axis_index if family.is_vector else ""
	rebased = family.table.render(b1, b2, family.basis_name, family.raw_name, index, dialect.assignment)

	logging.debug(f"{family.name} {case.label}: {len(raw_entries)} raw entries, {len(rebased)} re-based entries")
	return CaseResult(family.name, case, raw_entries, rebased)


def _generate_case_task(args):
	"""Helper function for parallel case generation."""
	family_name, code, dialect = args
	return generate_case(get_family(family_name), case_for_switch(code), dialect)


def generate_family(
	family: IntegralFamily,
	cases: Sequence[GenerationCase] = GENERATION_CASES,
	dialect: OutputDialect = FORTRAN90,
	workers: int = 1,
) -> List[CaseResult]:
	"""Generate every case of a family, in case order, optionally in a process pool."""
	logging.info(f"Generating {family.name} integrals for {len(cases)} cases")
	if workers <= 1:
		return [generate_case(family, case, dialect) for case in cases]

	pool = mp.Pool(workers)
	logging.info(f"Initialized multiprocessing pool with {workers} workers")
	try:
		return pool.map(_generate_case_task, [(family.name, case.switch_code, dialect) for case in cases])
	finally:
		pool.close()
		pool.join()


def render_family(results: Sequence[CaseResult], dialect: OutputDialect = FORTRAN90) -> str:
	"""Complete artifact text for the case results of one family."""
	branches = [
		(
			result.case.switch_code,
			[wrap_line(entry, dialect) for entry in result.raw_entries],
			[wrap_line(line, dialect) for line in result.rebased],
		)
		for result in results
	]
	return render_switch(branches, dialect)


def write_family(
	family: IntegralFamily, output_dir: str = ".", dialect: OutputDialect = FORTRAN90, workers: int = 1
) -> str:
	"""Generate and write one family's artifact, returning its path."""
	results = generate_family(family, GENERATION_CASES, dialect, workers)
	path = os.path.join(output_dir, family.output_name)
	write_text(path, render_family(results, dialect))
	return path


def render_boys(dialect: OutputDialect = FORTRAN90) -> str:
	return "".join(wrap_line(text, dialect) + "\n\n" for text in closed_forms())


def render_series(dialect: OutputDialect = FORTRAN90) -> str:
	return wrap_line(series_approximation(), dialect) + "\n\n"


def write_boys(output_dir: str = ".", dialect: OutputDialect = FORTRAN90) -> List[str]:
	"""Write the closed-form and small-argument Boys function files."""
	gamma_path = os.path.join(output_dir, BOYS_OUTPUT)
	write_text(gamma_path, render_boys(dialect))
	approx_path = os.path.join(output_dir, SERIES_OUTPUT)
	write_text(approx_path, render_series(dialect))
	return [gamma_path, approx_path]


def dialect_for(config: GeneratorConfig) -> OutputDialect:
	return OutputDialect(line_width=config.line_width, continuation=config.continuation)


def generate_all(config: GeneratorConfig) -> List[str]:
	"""
	Run a full generation.

	Args:
		config: Run configuration

	Returns:
		Paths of the written artifacts

	Raises:
		RuntimeError: If an artifact cannot be written
	"""
	dialect = dialect_for(config)
	try:
		os.makedirs(config.output_dir, exist_ok=True)
	except OSError as e:
		raise RuntimeError(f"Cannot create output directory {config.output_dir}: {e}") from e

	paths = []
	for name in config.families:
		paths.append(write_family(get_family(name), config.output_dir, dialect, config.workers))
	if config.boys:
		paths.extend(write_boys(config.output_dir, dialect))

	logging.info(f"Generation finished: {len(paths)} files written to {config.output_dir}")
	return paths


def raw_values(
	family: IntegralFamily, case: GenerationCase, values: Dict[str, float], axis: Optional[int] = None
) -> np.ndarray:
	"""
	Numerically evaluate the raw matrix of a case.

	Args:
		family: Integral family
		case: Generation case
		values: Symbol values, e.g. {"PA(1)": 0.1, ..., "preFactor": 1.0}
		axis: Cartesian axis for vector families

	Returns:
		Array of shape (n1, n2)
	"""
	n1, n2 = case.raw_dims
	result = np.zeros((n1, n2))
	for orbital1 in range(1, n1 + 1):
		for orbital2 in range(1, n2 + 1):
			result[orbital1 - 1, orbital2 - 1] = family.expand(orbital1, orbital2, axis).evaluate(values)
	return result


def basis_values(
	family: IntegralFamily, case: GenerationCase, values: Dict[str, float], axis: Optional[int] = None
) -> np.ndarray:
	"""Re-based values of a case, shape (b1, b2)."""
	b1, b2 = case.basis_dims
	return family.table.apply(raw_values(family, case, values, axis), b1, b2)
