"""Readers for the thermo.inp grammar.

The format is line oriented but mixes whitespace-separated fields with
fixed-column conventions inherited from Fortran card images. Each reader
takes the full text and a start position and returns the parsed value and the
position just past what it consumed; nothing is sliced off the input except
single lines that are tokenized on their own.

Layout handled here::

    thermo
        200.00   1000.00   6000.00  20000.     9/09/04
    NAME  description  N   2.00O   2.00   44.01280   -393510.000
        200.000   1000.000  7 -2.0 -1.0  0.0  1.0  2.0  3.0  4.0  0.0
     a1 a2 a3 a4 a5                (D-exponent literals)
     a6 a7 b1 b2
        ... further range blocks ...
    END PRODUCTS

Two failure tiers are kept apart. Structural mismatches raise
:class:`ThermoParseError`; unreadable coefficient, constant, molecular weight
and heat of formation tokens quietly become 0.0.
"""

from __future__ import annotations

import enum
import logging
import re

from thermoinp.constants import (
    COEFFICIENT_COUNT,
    COMMENT_PREFIX,
    END_MARKER,
    HEADER_BREAKPOINT_COUNT,
    HEADER_MARKER,
    INTEGRATION_CONSTANT_COUNT,
    LINE2_COEFFICIENTS,
    LINE3_COEFFICIENTS,
    MIN_TOKENS_FOR_CONSTANTS,
)
from thermoinp.errors import LiteralError, ThermoParseError
from thermoinp.literals import (
    decode_d_token,
    decode_plain_token,
    read_spaced_number,
    skip_hspace,
)
from thermoinp.models import Species, TemperatureRange, ThermoFile, ThermoHeader

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s*")
_SYMBOL = re.compile(r"[^\W\d_]+")
_NAME = re.compile(r"\S+")
_FIELD_GAP = re.compile(r"[ \t]+")
_DESCRIPTION = re.compile(r"[^ \r\n]*")


class Boundary(enum.Enum):
    """What follows the current position inside the species section."""

    MORE_RANGES = "more_ranges"
    NEXT_SPECIES = "next_species"
    END_MARKER = "end_marker"
    EMPTY = "empty"


def _skip_whitespace(text: str, pos: int) -> int:
    return _WHITESPACE.match(text, pos).end()


def _take_line(text: str, pos: int, rule: str) -> tuple[str, int]:
    """Return the rest of the current line and the start of the next one.

    The line must be terminated; a trailing carriage return is dropped.
    """
    newline = text.find("\n", pos)
    if newline == -1:
        raise ThermoParseError(rule, pos)
    line = text[pos:newline]
    if line.endswith("\r"):
        line = line[:-1]
    return line, newline + 1


def skip_preamble(text: str, pos: int = 0) -> int:
    """Skip blank space and whole ``!`` comment lines."""
    while True:
        pos = _skip_whitespace(text, pos)
        if not text.startswith(COMMENT_PREFIX, pos):
            return pos
        newline = text.find("\n", pos)
        if newline == -1:
            return len(text)
        pos = newline + 1


def read_header(text: str, pos: int = 0) -> tuple[ThermoHeader, int]:
    """Read the ``thermo`` marker, the four breakpoints and the date stamp."""
    pos = skip_preamble(text, pos)
    if not text.startswith(HEADER_MARKER, pos):
        raise ThermoParseError(f"{HEADER_MARKER!r} marker", pos)
    pos = _skip_whitespace(text, pos + len(HEADER_MARKER))

    breakpoints = []
    for _ in range(HEADER_BREAKPOINT_COUNT):
        try:
            value, pos = read_spaced_number(text, pos)
        except LiteralError as exc:
            raise ThermoParseError("header temperature breakpoint", exc.position) from exc
        breakpoints.append(value)

    date, pos = _take_line(text, skip_hspace(text, pos), "header date line")
    return ThermoHeader(temp_ranges=tuple(breakpoints), date=date.strip()), pos


def read_elements(text: str, pos: int = 0) -> tuple[tuple[tuple[str, float], ...], int]:
    """Read packed ``symbol count`` pairs such as ``N   2.00O   2.00``.

    Reading stops at the first place where a symbol or its count is missing;
    the returned position points at the unread remainder, which normally holds
    the molecular weight and heat of formation.
    """
    pairs = []
    while pos < len(text):
        start = skip_hspace(text, pos)
        symbol = _SYMBOL.match(text, start)
        if symbol is None:
            break
        try:
            count, pos = read_spaced_number(text, symbol.end())
        except LiteralError:
            break
        pairs.append((symbol.group(), count))
    return tuple(pairs), pos


def classify_boundary(text: str, pos: int) -> Boundary:
    """Decide whether another range block, a new species or the end follows."""
    pos = _skip_whitespace(text, pos)
    if pos >= len(text):
        return Boundary.EMPTY
    if text.startswith(END_MARKER, pos):
        return Boundary.END_MARKER
    if text[pos].isalpha():
        return Boundary.NEXT_SPECIES
    return Boundary.MORE_RANGES


def read_temperature_range(text: str, pos: int = 0) -> tuple[TemperatureRange, int]:
    """Read a three-line range block.

    Line 1 holds the bounds (the rest of it is range metadata and is ignored).
    Line 2 feeds coefficients a1..a5. Line 3 feeds a6 and a7 from its first two
    tokens and, when it has at least four tokens, b1 and b2 from its last two.
    On a short line 3 the same token can feed both a coefficient and a
    constant.
    """
    try:
        temp_low, pos = read_spaced_number(text, skip_hspace(text, pos))
        temp_high, pos = read_spaced_number(text, pos)
    except LiteralError as exc:
        raise ThermoParseError("temperature range bounds", exc.position) from exc
    _, pos = _take_line(text, pos, "temperature range bounds line")
    first_line, pos = _take_line(text, pos, "first coefficient line")
    second_line, pos = _take_line(text, pos, "second coefficient line")

    coefficients = [0.0] * COEFFICIENT_COUNT
    integration_constants = [0.0] * INTEGRATION_CONSTANT_COUNT

    for index, token in enumerate(first_line.split()[:LINE2_COEFFICIENTS]):
        coefficients[index] = decode_d_token(token)

    tokens = second_line.split()
    for index, token in enumerate(tokens[:LINE3_COEFFICIENTS]):
        coefficients[LINE2_COEFFICIENTS + index] = decode_d_token(token)
    if len(tokens) >= MIN_TOKENS_FOR_CONSTANTS:
        for index, token in enumerate(tokens[-INTEGRATION_CONSTANT_COUNT:]):
            integration_constants[index] = decode_d_token(token)

    return (
        TemperatureRange(
            temp_low=temp_low,
            temp_high=temp_high,
            coefficients=tuple(coefficients),
            integration_constants=tuple(integration_constants),
        ),
        pos,
    )


def read_species(text: str, pos: int = 0, strict: bool = False) -> tuple[Species, int]:
    """Read one species header line followed by its range blocks.

    The description ends at the first space after the name, so multi-word
    descriptions are truncated to their first word. Tabs do not end it.

    Args:
        text: Input buffer.
        pos: Start of the species header line.
        strict: Propagate a failed range block instead of ending the record.

    Returns:
        The species and the position after its last range block.
    """
    name = _NAME.match(text, pos)
    if name is None:
        raise ThermoParseError("species name", pos)
    gap = _FIELD_GAP.match(text, name.end())
    if gap is None:
        raise ThermoParseError("species name separator", name.end())
    description = _DESCRIPTION.match(text, gap.end())
    gap = _FIELD_GAP.match(text, description.end())
    if gap is None:
        raise ThermoParseError("species description", description.end())
    header_rest, pos = _take_line(text, gap.end(), "species header line")

    elements, used = read_elements(header_rest)
    tokens = header_rest[used:].split()
    molecular_weight = decode_plain_token(tokens[-2]) if len(tokens) >= 2 else 0.0
    heat_of_formation = decode_plain_token(tokens[-1]) if len(tokens) >= 1 else 0.0

    ranges = []
    while classify_boundary(text, pos) is Boundary.MORE_RANGES:
        try:
            temperature_range, pos = read_temperature_range(text, pos)
        except ThermoParseError as exc:
            if strict:
                raise
            logger.debug("Species %s: range block ended early (%s)", name.group(), exc)
            break
        ranges.append(temperature_range)

    species = Species(
        name=name.group(),
        description=description.group(),
        elements=elements,
        molecular_weight=molecular_weight,
        heat_of_formation=heat_of_formation,
        temperature_ranges=tuple(ranges),
    )
    return species, pos


def _skip_end_line(text: str, pos: int) -> int:
    """Return the start of the line after an ``END`` marker line."""
    newline = text.find("\n", _skip_whitespace(text, pos))
    return len(text) if newline == -1 else newline + 1


def parse_thermo_file(text: str, strict: bool = False) -> ThermoFile:
    """Parse a complete thermo.inp buffer.

    Args:
        text: Full file contents.
        strict: Raise on malformed range blocks and unparsed trailing content
            instead of stopping quietly.

    Returns:
        The header and every species read before the end of input or the first
        record that could not be read. ``END`` section markers are skipped.

    Raises:
        ThermoParseError: The header is missing or malformed, or ``strict`` is
            set and a record or trailing content could not be read.
    """
    try:
        header, pos = read_header(text)
    except ThermoParseError as exc:
        raise exc.located(text) from exc

    species = []
    while True:
        boundary = classify_boundary(text, pos)
        if boundary is Boundary.EMPTY:
            break
        if boundary is Boundary.END_MARKER:
            pos = _skip_end_line(text, pos)
            continue
        try:
            entry, pos = read_species(text, pos, strict=strict)
        except ThermoParseError as exc:
            if strict:
                raise exc.located(text) from exc
            logger.debug("Discarding unparsed trailing content: %s", exc.located(text))
            break
        species.append(entry)

    logger.info("Parsed %d species", len(species))
    return ThermoFile(header=header, species=tuple(species))
