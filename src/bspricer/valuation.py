"""Break-even and payoff helpers for vanilla positions.

Unlike the pricing engine these validate their inputs and raise one of the
:class:`~bspricer.core.MathError` subclasses on the first bad argument,
checked in the order strike, stock, premium.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from .core import (
    OptionKind, Position, CALL, LONG,
    NonPositiveStock, check_strike, check_stock, check_premium,
)

__all__ = ["break_even_point", "payoff", "payoff_vec"]


def break_even_point(kind: OptionKind, strike: float, premium: Optional[float] = None) -> float:
    """Underlying price at which the position neither gains nor loses.

    ``strike + premium`` for a call, ``strike - premium`` for a put.
    """
    kind = OptionKind(kind)
    check_strike(strike)
    premium = premium or 0.0
    check_premium(premium)
    if kind == CALL:
        return float(strike + premium)
    return float(strike - premium)


def payoff(
    position: Position,
    kind: OptionKind,
    strike: float,
    stock: float,
    premium: Optional[float] = None,
) -> float:
    """Profit / loss per share of a position at underlying price ``stock``.

    Long positions return the intrinsic value only; short positions keep the
    premium received less the intrinsic value paid out.
    """
    position, kind = Position(position), OptionKind(kind)
    check_strike(strike)
    check_stock(stock)
    premium = premium or 0.0
    check_premium(premium)

    intrinsic = max(stock - strike, 0.0) if kind == CALL else max(strike - stock, 0.0)
    if position == LONG:
        return float(intrinsic)
    return float(premium - intrinsic)


def payoff_vec(
    position: Position,
    kind: OptionKind,
    strike: float,
    stocks,
    premium: Optional[float] = None,
) -> np.ndarray:
    """:func:`payoff` over an array of underlying prices, e.g. for a payoff diagram.

    Raises :class:`NonPositiveStock` if any element of ``stocks`` is negative.
    """
    position, kind = Position(position), OptionKind(kind)
    check_strike(strike)
    stocks = np.asarray(stocks, dtype=float)
    if np.any(stocks < 0.0):
        raise NonPositiveStock(f"stock must be non-negative, got min {stocks.min()}")
    premium = premium or 0.0
    check_premium(premium)

    if kind == CALL:
        intrinsic = np.maximum(stocks - strike, 0.0)
    else:
        intrinsic = np.maximum(strike - stocks, 0.0)
    if position == LONG:
        return intrinsic
    return premium - intrinsic
