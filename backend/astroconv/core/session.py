"""Converter session — the state behind the conversion form.

One session holds the text typed in the value field, the unit chosen in the
selector and the inline error message.  Only two events mutate it:

    session = ConverterSession()
    session.on_unit_changed("Unité Astronomique (UA)")
    session.on_value_changed("1")
    session.results  # -> one ConversionResult per catalog unit
"""

from __future__ import annotations

import logging
from typing import Optional

from astroconv.core.catalog import SOURCES, Unit, all_units, default_unit, get_unit
from astroconv.core.conversion import ConversionResult, convert
from astroconv.core.formatting import format_number
from astroconv.core.validation import validate

logger = logging.getLogger(__name__)


class ConverterSession:
    """UI state of the converter form.

    Invariants:
        * ``error`` is non-empty only when the last edit was rejected, and
          ``raw_value`` is then empty.
        * ``selected_unit`` is always a catalog unit.
    """

    def __init__(self) -> None:
        self.raw_value: str = ""
        self.selected_unit: Unit = default_unit()
        self.error: str = ""
        self._cache_key: Optional[tuple[str, Unit]] = None
        self._cached_results: list[ConversionResult] = []

    # ── Events ───────────────────────────────────────────────────────────────

    def on_value_changed(self, raw_text: str) -> None:
        """Validate the typed text and store it, or store the error instead."""
        result = validate(raw_text)
        self.raw_value = result.sanitized_value
        self.error = result.error
        if result.error:
            logger.info("Rejected value %r for %s", raw_text, self.selected_unit.name)
        else:
            logger.debug("Value set to %r (%s)", raw_text, self.selected_unit.name)

    def on_unit_changed(self, unit_name: str) -> None:
        """Select another unit. Clears the value and any error.

        Raises:
            UnknownUnitError: If ``unit_name`` is not in the catalog.
        """
        unit = get_unit(unit_name)
        self.selected_unit = unit
        self.raw_value = ""
        self.error = ""
        logger.debug("Unit changed to %s", unit.name)

    def reset(self) -> None:
        """Return to the defaults used when the form is first shown."""
        self.raw_value = ""
        self.selected_unit = default_unit()
        self.error = ""

    # ── Derived state ────────────────────────────────────────────────────────

    @property
    def has_value(self) -> bool:
        return bool(self.raw_value) and not self.error

    @property
    def results(self) -> list[ConversionResult]:
        """Conversion of the current value into every unit, or [] without a valid value."""
        if not self.has_value:
            return []
        key = (self.raw_value, self.selected_unit)
        if key != self._cache_key:
            self._cached_results = convert(float(self.raw_value), self.selected_unit)
            self._cache_key = key
        return list(self._cached_results)

    def snapshot(self) -> dict:
        """View model used by the API and the HTML view."""
        unit = self.selected_unit
        return {
            "selected_unit": unit.name,
            "explanation": unit.explanation,
            "value": self.raw_value,
            "error": self.error,
            "units": [u.name for u in all_units()],
            "results": [
                {"name": r.name, "value": r.value, "formatted": format_number(r.value)}
                for r in self.results
            ],
            "sources": list(SOURCES),
        }
