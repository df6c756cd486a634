from __future__ import annotations
from enum import Enum
from typing import Callable

import numpy as np


class OptionKind(str, Enum):
    """Option type.  Members compare equal to ``"call"`` / ``"put"``."""
    CALL = "call"
    PUT = "put"


class Position(str, Enum):
    """Side of the position, only used for payoff."""
    LONG = "long"
    SHORT = "short"


CALL  = OptionKind.CALL
PUT   = OptionKind.PUT
LONG  = Position.LONG
SHORT = Position.SHORT


# ---------------------------------------------------------------------------
# Error taxonomy
# ---------------------------------------------------------------------------
class MathError(ValueError):
    """Base of the three input failures raised by the validated helpers."""


class NonPositiveStrike(MathError):
    pass


class NonPositiveStock(MathError):
    pass


class NonPositivePremium(MathError):
    pass


def check_strike(strike: float) -> None:
    if strike < 0.0:
        raise NonPositiveStrike(f"strike must be non-negative, got {strike}")


def check_stock(stock: float) -> None:
    if stock < 0.0:
        raise NonPositiveStock(f"stock must be non-negative, got {stock}")


def check_premium(premium: float) -> None:
    if premium < 0.0:
        raise NonPositivePremium(f"premium must be non-negative, got {premium}")


# ---------------------------------------------------------------------------
# IEEE-754 propagation
# ---------------------------------------------------------------------------
def ieee(math_fn: Callable[..., float], np_fn: Callable, *args: float) -> float:
    """Evaluate ``math_fn`` but return the IEEE-754 result where it would raise.

    ``math.log(0.0)``, ``math.exp(1e6)`` and ``1.0 / 0.0`` raise in Python;
    the pricing formulas must instead propagate ``inf`` / ``nan``.
    """
    try:
        return math_fn(*args)
    except (ValueError, OverflowError, ZeroDivisionError):
        with np.errstate(all="ignore"):
            return float(np_fn(*args))
