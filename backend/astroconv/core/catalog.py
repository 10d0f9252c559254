"""Unit catalog. Every conversion factor is expressed in metres.

Normalised astronomical constants (sources: IAU 2012, NASA).
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType


class UnknownUnitError(KeyError):
    """Raised when a unit name is not part of the catalog."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown unit '{self.name}'"


@dataclass(frozen=True)
class Unit:
    name: str
    explanation: str
    conversion_factor: float  # 1 unit = conversion_factor metres

    def __post_init__(self) -> None:
        if not self.conversion_factor > 0:
            raise ValueError(
                f"Conversion factor of '{self.name}' must be positive, got {self.conversion_factor}"
            )


@dataclass(frozen=True)
class UnitCategory:
    name: str
    units: tuple[Unit, ...]


# ── Catalog ──────────────────────────────────────────────────────────────────

CATALOG: tuple[UnitCategory, ...] = (
    UnitCategory("Distances humaines", (
        Unit(
            "Kilomètre (km)",
            "Le Kilomètre est une unité de mesure de distance équivalente à 1 000 mètres. "
            "Il est couramment utilisé pour exprimer des distances sur Terre.",
            1000.0,
        ),
        Unit(
            "Million de kilomètres (10^6 km)",
            "Un Million de kilomètres est une unité de mesure de distance équivalente à "
            "1 000 000 de kilomètres. Il est utilisé pour exprimer de grandes distances "
            "dans le système solaire.",
            1e9,
        ),
        Unit(
            "Milliard de kilomètres (10^9 km)",
            "Un Milliard de kilomètres est une unité de mesure de distance équivalente à "
            "1 000 000 000 de kilomètres. Il est utilisé pour exprimer des distances "
            "interplanétaires.",
            1e12,
        ),
    )),
    UnitCategory("Astronomie du système solaire", (
        Unit(
            "Unité Astronomique (UA)",
            "L'Unité Astronomique est la distance moyenne de la Terre au Soleil, soit "
            "environ 149,6 millions de kilomètres. Elle est utilisée pour exprimer les "
            "distances au sein de notre système solaire.",
            149_597_870_700.0,
        ),
    )),
    UnitCategory("Astronomie stellaire", (
        Unit(
            "Rayon solaire (R☉)",
            "Le Rayon solaire est une unité de distance utilisée pour exprimer la taille "
            "des étoiles. Un rayon solaire est égal à 695 700 kilomètres.",
            695_700_000.0,  # NASA
        ),
    )),
    UnitCategory("Astronomie interstellaire", (
        Unit(
            "Année-Lumière (al)",
            "Une Année-Lumière est la distance que la lumière parcourt dans le vide en une "
            "année julienne. Elle est utilisée pour exprimer les distances astronomiques "
            "en dehors du système solaire.",
            9.460730472e15,
        ),
        Unit(
            "Parsec (pc)",
            "Un Parsec est la distance à laquelle une unité astronomique sous-tend un angle "
            "d'une seconde d'arc. Il est couramment utilisé en astronomie pour mesurer de "
            "grandes distances vers des objets astronomiques en dehors du système solaire.",
            3.085677581e16,
        ),
    )),
)

SOURCES: tuple[str, ...] = (
    "International Astronomical Union (2012)",
    "NASA – Units of Distance",
)


def _flatten(categories: tuple[UnitCategory, ...]) -> tuple[Unit, ...]:
    units = tuple(unit for category in categories for unit in category.units)
    seen: set[str] = set()
    for unit in units:
        if unit.name in seen:
            raise ValueError(f"Duplicate unit name in catalog: '{unit.name}'")
        seen.add(unit.name)
    return units


ALL_UNITS: tuple[Unit, ...] = _flatten(CATALOG)
UNITS_BY_NAME = MappingProxyType({unit.name: unit for unit in ALL_UNITS})


def all_units() -> tuple[Unit, ...]:
    """All units in flattened order (category order, then unit order)."""
    return ALL_UNITS


def get_unit(name: str) -> Unit:
    """Look a unit up by its display name."""
    try:
        return UNITS_BY_NAME[name]
    except KeyError:
        raise UnknownUnitError(name) from None


def default_unit() -> Unit:
    return CATALOG[0].units[0]
