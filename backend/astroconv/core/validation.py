"""Validation of the raw text typed in the value field."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

INVALID_INPUT_MESSAGE = "Veuillez entrer une valeur numérique positive."

# Signed integers, decimals and exponent notation; no underscores, no hex, no nan/inf.
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


class InvalidInputError(ValueError):
    """Raised when the text is empty, not a number, or negative."""

    def __init__(self, raw_text: str) -> None:
        super().__init__(INVALID_INPUT_MESSAGE)
        self.raw_text = raw_text


@dataclass(frozen=True)
class InputResult:
    sanitized_value: str
    error: str = ""

    @property
    def valid(self) -> bool:
        return not self.error


def parse_value(raw_text: str) -> float:
    """Parse a non-negative finite number, raising InvalidInputError otherwise."""
    text = raw_text.strip()
    if not _NUMBER_RE.fullmatch(text):
        raise InvalidInputError(raw_text)
    value = float(text)
    if not math.isfinite(value) or value < 0:
        raise InvalidInputError(raw_text)
    return value


def validate(raw_text: str) -> InputResult:
    """Check user input. Valid text is returned unchanged, invalid text is dropped."""
    try:
        parse_value(raw_text)
    except InvalidInputError as exc:
        return InputResult(sanitized_value="", error=str(exc))
    return InputResult(sanitized_value=raw_text)
