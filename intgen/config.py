"""Run configuration and its ``key = value`` file format."""

from dataclasses import dataclass, field, replace
from typing import List

from .families import FAMILIES

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class GeneratorConfig:
	"""Container for the settings of one generation run."""

	output_dir: str = "."
	families: List[str] = field(default_factory=lambda: list(FAMILIES.keys()))
	boys: bool = True
	line_width: int = 79
	continuation: str = "&"
	workers: int = 1
	log_dir: str = "logs"
	log_level: str = "INFO"

	def __post_init__(self):
		for name in self.families:
			if name not in FAMILIES:
				raise ValueError(f"Unknown integral family: {name}. Available: {list(FAMILIES.keys())}")
		if self.workers < 1:
			raise ValueError(f"Number of workers must be at least 1, got {self.workers}")
		if self.line_width < 1:
			raise ValueError(f"Line width must be positive, got {self.line_width}")
		self.log_level = self.log_level.upper()
		if self.log_level not in LOG_LEVELS:
			raise ValueError(f"Unknown log level: {self.log_level}. Available: {list(LOG_LEVELS)}")

	def updated(self, **changes) -> "GeneratorConfig":
		"""Copy with the given fields replaced; ``None`` values are ignored."""
		return replace(self, **{key: value for key, value in changes.items() if value is not None})


def _parse_bool(value: str) -> bool:
	lowered = value.lower()
	if lowered in ("true", "yes", "on", "1"):
		return True
	if lowered in ("false", "no", "off", "0"):
		return False
	raise ValueError(f"Invalid boolean value: {value}")


def parse_config_file(filename: str) -> GeneratorConfig:
	"""
	Parse a generator configuration file.

	Format:
	```
	# where to write NucIntg, KE_Intg, momIntg, gamma and approx
	output_dir = build/fortran
	families = nuclear, kinetic
	boys = yes
	line_width = 79
	continuation = &
	workers = 4
	log_dir = logs
	log_level = DEBUG
	```
	"""
	settings = {}

	with open(filename, "r") as f:
		lines = [line.strip() for line in f.readlines()]

	for line in lines:
		if not line or line.startswith("#"):
			continue

		if "=" not in line:
			raise ValueError(f"Invalid configuration line: {line}")

		key, value = [x.strip() for x in line.split("=", 1)]
		key = key.lower()

		if key == "output_dir":
			settings["output_dir"] = value
		elif key == "families":
			settings["families"] = [name.strip().lower() for name in value.split(",") if name.strip()]
		elif key == "boys":
			settings["boys"] = _parse_bool(value)
		elif key == "line_width":
			settings["line_width"] = int(value)
		elif key == "continuation":
			settings["continuation"] = value
		elif key == "workers":
			settings["workers"] = int(value)
		elif key == "log_dir":
			settings["log_dir"] = value
		elif key == "log_level":
			settings["log_level"] = value
		else:
			raise ValueError(f"Unknown configuration key: {key}")

	return GeneratorConfig(**settings)
