from .cases import GENERATION_CASES, GenerationCase
from .config import GeneratorConfig, parse_config_file
from .families import FAMILIES, IntegralFamily, get_family
from .generator import generate_all, generate_case
from .writer import OutputDialect

__version__ = "0.1.0"

__all__ = [
	"GENERATION_CASES",
	"GenerationCase",
	"GeneratorConfig",
	"parse_config_file",
	"FAMILIES",
	"IntegralFamily",
	"get_family",
	"generate_all",
	"generate_case",
	"OutputDialect",
]
