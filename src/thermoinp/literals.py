"""Numeric literal reader for the two float dialects found in thermo.inp files.

Dialect A is the Fortran double-precision notation, where ``D`` marks the
exponent (``1.066859930D-05``). Dialect B is ordinary decimal/scientific
notation. Readers take a text and a start position and return the decoded
value together with the position just past the literal.
"""

from __future__ import annotations

import logging
import re

from thermoinp.errors import LiteralError

logger = logging.getLogger(__name__)

_D_LITERAL = re.compile(r"([+-]?[0-9]+(?:\.[0-9]+)?)D([+-]?[0-9]+)")
_PLAIN_LITERAL = re.compile(
    r"[+-]?(?:(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|(?i:infinity|inf|nan))"
)
_HSPACE = re.compile(r"[ \t]*")


def skip_hspace(text: str, pos: int = 0) -> int:
    """Return the first position at or after ``pos`` that is not a space or tab."""
    return _HSPACE.match(text, pos).end()


def read_d_number(text: str, pos: int = 0) -> tuple[float, int]:
    match = _D_LITERAL.match(text, pos)
    if match is None:
        raise LiteralError("D-exponent literal", pos)
    mantissa, exponent = match.groups()
    return float(f"{mantissa}E{exponent}"), match.end()


def read_plain_number(text: str, pos: int = 0) -> tuple[float, int]:
    match = _PLAIN_LITERAL.match(text, pos)
    if match is None:
        raise LiteralError("float literal", pos)
    return float(match.group()), match.end()


def read_number(text: str, pos: int = 0) -> tuple[float, int]:
    """Read a literal in either dialect, preferring the ``D`` exponent form."""
    try:
        return read_d_number(text, pos)
    except LiteralError:
        pass
    try:
        return read_plain_number(text, pos)
    except LiteralError:
        raise LiteralError("numeric literal", pos) from None


def read_spaced_number(text: str, pos: int = 0) -> tuple[float, int]:
    """Read a literal surrounded by optional spaces or tabs."""
    value, end = read_number(text, skip_hspace(text, pos))
    return value, skip_hspace(text, end)


def decode_d_token(token: str, default: float = 0.0) -> float:
    """Decode a whitespace-delimited token as a ``D``-exponent literal.

    Only a prefix of the token has to match, so packed fields such as
    ``-7.453750000D+02-1.172081224D+01`` yield their first value.
    """
    try:
        value, _ = read_d_number(token)
    except LiteralError:
        logger.debug("Token %r is not a D-exponent literal, using %s", token, default)
        return default
    return value


def decode_plain_token(token: str, default: float = 0.0) -> float:
    match = _PLAIN_LITERAL.fullmatch(token)
    if match is None:
        logger.debug("Token %r is not a float literal, using %s", token, default)
        return default
    return float(token)
