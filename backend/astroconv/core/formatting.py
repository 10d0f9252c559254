"""French number formatting: ``1234567.1`` -> ``"1 234 567,1000"``."""

from __future__ import annotations

import math
from decimal import Context, Decimal, ROUND_HALF_UP

DECIMALS = 4
THOUSANDS_SEPARATOR = " "
DECIMAL_SEPARATOR = ","

_QUANTUM = Decimal(1).scaleb(-DECIMALS)
# Wide enough for the 309 integer digits of the largest float.
_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)


def format_number(number: float) -> str:
    """Round to 4 decimals, group thousands with spaces, use a decimal comma.

    Rounding works on the exact binary value of the float and sends ties
    away from zero, so ``0.03125`` gives ``"0,0313"``.
    """
    if not math.isfinite(number):
        # Huge inputs can overflow once expressed in metres
        return str(number)
    number += 0.0  # -0.0 -> 0.0
    rounded = Decimal(number).quantize(_QUANTUM, context=_CONTEXT)
    fixed = f"{rounded:,.{DECIMALS}f}"
    integer_part, decimal_part = fixed.split(".")
    return integer_part.replace(",", THOUSANDS_SEPARATOR) + DECIMAL_SEPARATOR + decimal_part
