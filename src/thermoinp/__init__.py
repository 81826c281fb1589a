"""thermoinp core package."""

from thermoinp.errors import LiteralError, ThermoParseError
from thermoinp.files import read_thermo_file, strip_comment_lines
from thermoinp.models import Species, TemperatureRange, ThermoFile, ThermoHeader
from thermoinp.parser import Boundary, classify_boundary, parse_thermo_file

__all__ = [
    "Boundary",
    "LiteralError",
    "Species",
    "TemperatureRange",
    "ThermoFile",
    "ThermoHeader",
    "ThermoParseError",
    "classify_boundary",
    "parse_thermo_file",
    "read_thermo_file",
    "strip_comment_lines",
]
