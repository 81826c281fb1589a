"""Data structures for parsed thermo.inp files."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

import numpy as np

from thermoinp.constants import (
    COEFFICIENT_COUNT,
    HEADER_BREAKPOINT_COUNT,
    INTEGRATION_CONSTANT_COUNT,
)


@dataclass(frozen=True)
class TemperatureRange:
    """One polynomial fit and the temperature interval it covers.

    Attributes:
        temp_low: Lower bound of the interval (K).
        temp_high: Upper bound of the interval (K).
        coefficients: Polynomial coefficients a1..a7.
        integration_constants: Enthalpy and entropy constants b1, b2.
    """

    temp_low: float
    temp_high: float
    coefficients: tuple[float, ...]
    integration_constants: tuple[float, ...]

    def __post_init__(self) -> None:
        if len(self.coefficients) != COEFFICIENT_COUNT:
            raise ValueError(
                f"Expected {COEFFICIENT_COUNT} coefficients, got {len(self.coefficients)}"
            )
        if len(self.integration_constants) != INTEGRATION_CONSTANT_COUNT:
            raise ValueError(
                f"Expected {INTEGRATION_CONSTANT_COUNT} integration constants, "
                f"got {len(self.integration_constants)}"
            )

    @property
    def coeffs(self) -> np.ndarray:
        """All nine fit parameters as ``[a1, ..., a7, b1, b2]``."""
        return np.array(self.coefficients + self.integration_constants, dtype=np.float64)

    def contains(self, temperature: float) -> bool:
        return self.temp_low <= temperature <= self.temp_high


@dataclass(frozen=True)
class Species:
    name: str
    description: str
    elements: tuple[tuple[str, float], ...]
    molecular_weight: float
    heat_of_formation: float
    temperature_ranges: tuple[TemperatureRange, ...]

    @property
    def composition(self) -> Mapping[str, float]:
        """Element counts keyed by symbol; repeated symbols are summed."""
        totals: dict[str, float] = {}
        for symbol, count in self.elements:
            totals[symbol] = totals.get(symbol, 0.0) + count
        return totals


@dataclass(frozen=True)
class ThermoHeader:
    temp_ranges: tuple[float, ...]
    date: str

    def __post_init__(self) -> None:
        if len(self.temp_ranges) != HEADER_BREAKPOINT_COUNT:
            raise ValueError(
                f"Expected {HEADER_BREAKPOINT_COUNT} temperature breakpoints, "
                f"got {len(self.temp_ranges)}"
            )


@dataclass(frozen=True)
class ThermoFile:
    header: ThermoHeader
    species: tuple[Species, ...]

    @property
    def species_names(self) -> list[str]:
        return [entry.name for entry in self.species]

    def get_species(self, name: str) -> Species | None:
        for entry in self.species:
            if entry.name == name:
                return entry
        return None
