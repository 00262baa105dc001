"""
Triad table for s-, p-, d- and f-type Cartesian Gaussian orbitals.

Each orbital index 1..20 maps to the Cartesian exponents (l, m, n) of
x**l * y**m * z**n following the Browne & Poshusta triad convention. The
order is part of the output contract: re-basing tables refer to orbitals by
position only.
"""

from typing import List, Tuple

Triad = Tuple[int, int, int]

_TRIADS: Tuple[Triad, ...] = (
	(0, 0, 0),  # s
	(1, 0, 0),  # x
	(0, 1, 0),  # y
	(0, 0, 1),  # z
	(2, 0, 0),  # xx
	(0, 2, 0),  # yy
	(0, 0, 2),  # zz
	(1, 1, 0),  # xy
	(1, 0, 1),  # xz
	(0, 1, 1),  # yz
	(1, 1, 1),  # xyz
	(2, 1, 0),  # xxy
	(2, 0, 1),  # xxz
	(0, 2, 1),  # yyz
	(1, 2, 0),  # yyx
	(1, 0, 2),  # zzx
	(0, 1, 2),  # zzy
	(3, 0, 0),  # xxx
	(0, 3, 0),  # yyy
	(0, 0, 3),  # zzz
)

ORBITAL_LABELS: Tuple[str, ...] = (
	"s",
	"x",
	"y",
	"z",
	"xx",
	"yy",
	"zz",
	"xy",
	"xz",
	"yz",
	"xyz",
	"xxy",
	"xxz",
	"yyz",
	"yyx",
	"zzx",
	"zzy",
	"xxx",
	"yyy",
	"zzz",
)

N_ORBITALS = len(_TRIADS)

# Number of Cartesian components and of standard basis functions per shell
RAW_DIMENSIONS: Tuple[int, ...] = (1, 4, 10, 20)
BASIS_DIMENSIONS: Tuple[int, ...] = (1, 4, 9, 16)


def triad_table() -> List[Triad]:
	"""Return the 20 triads in canonical order (position 0 is orbital 1)."""
	return list(_TRIADS)


def triad_of(orbital_index: int) -> Triad:
	"""
	Look up the triad of a 1-based orbital index.

	Args:
		orbital_index: Orbital index in 1..20

	Returns:
		Tuple (lx, ly, lz) of Cartesian exponents
	"""
	if not 1 <= orbital_index <= N_ORBITALS:
		raise ValueError(f"Orbital index {orbital_index} outside 1..{N_ORBITALS}")
	return _TRIADS[orbital_index - 1]


def shell_of(orbital_index: int) -> int:
	"""Total angular momentum of an orbital: 0 for s up to 3 for f."""
	return sum(triad_of(orbital_index))
