"""Unit conversion. Internal representation is always metres."""

from __future__ import annotations

from dataclasses import dataclass

from astroconv.core.catalog import Unit, all_units


@dataclass(frozen=True)
class ConversionResult:
    name: str
    value: float


def to_metres(value: float, unit: Unit) -> float:
    """Convert a value from the given unit to metres."""
    return value * unit.conversion_factor


def from_metres(value: float, unit: Unit) -> float:
    """Convert a value from metres to the given unit."""
    return value / unit.conversion_factor


def convert_between(value: float, from_unit: Unit, to_unit: Unit) -> float:
    return from_metres(to_metres(value, from_unit), to_unit)


def convert(value: float, from_unit: Unit) -> list[ConversionResult]:
    """Express ``value`` (in ``from_unit``) in every catalog unit.

    Results follow the flattened catalog order. The value must already be
    validated: this function has no failure path.
    """
    value_in_metres = to_metres(value, from_unit)
    return [
        ConversionResult(unit.name, from_metres(value_in_metres, unit))
        for unit in all_units()
    ]
