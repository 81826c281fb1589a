"""Exceptions raised while parsing thermo.inp text."""

from __future__ import annotations


class ThermoParseError(ValueError):
    """A grammar rule could not match the input.

    ``position`` is the index where the failing reader was looking when the rule
    failed. ``offset`` and ``line`` are filled in once the error reaches the
    file reader and refer to the whole input buffer. Positions and offsets
    count characters of the decoded text, not bytes of the file.
    """

    def __init__(
        self,
        rule: str,
        position: int = 0,
        offset: int | None = None,
        line: int | None = None,
    ) -> None:
        self.rule = rule
        self.position = position
        self.offset = offset
        self.line = line
        super().__init__(self._describe())

    def _describe(self) -> str:
        if self.line is not None:
            return f"could not match {self.rule} at line {self.line} (offset {self.offset})"
        return f"could not match {self.rule} at position {self.position}"

    def located(self, source: str) -> ThermoParseError:
        """Return a copy of this error with its offset and line resolved in ``source``."""
        offset = min(self.position, len(source))
        line = source.count("\n", 0, offset) + 1
        return type(self)(self.rule, self.position, offset=offset, line=line)


class LiteralError(ThermoParseError):
    """No numeric literal starts at the requested position."""
