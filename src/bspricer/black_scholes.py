from __future__ import annotations
import logging
import math
import operator
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .core import OptionKind, CALL, ieee
from .normal import norm_cdf

__all__ = ["BlackScholesModel", "price"]

logger = logging.getLogger(__name__)


def _d1_d2(strike, stock, interest_rate, volatility, time_to_expire, dividend) -> Tuple[float, float]:
    # Evaluated left to right as vol**2 / 2 * T / vol * sqrt(T), not the textbook d1.
    # No positivity checks; degenerate inputs give inf/nan.
    sqrt_t = ieee(math.sqrt, np.sqrt, time_to_expire)
    moneyness = ieee(math.log, np.log, ieee(operator.truediv, np.divide, stock, strike))
    drift = ieee(operator.truediv, np.divide,
                 volatility * volatility / 2.0 * time_to_expire, volatility)
    d1 = moneyness + interest_rate - dividend + drift * sqrt_t
    d2 = d1 - volatility * sqrt_t
    return d1, d2


def _discount(rate: float, time_to_expire: float) -> float:
    # e ** (-rate * T) through pow; exp differs in the last bit
    return ieee(math.pow, np.power, math.e, -rate * time_to_expire)


def price(
    kind: OptionKind,
    strike: float,
    stock: float,
    interest_rate: float,
    volatility: float,
    time_to_expire: float,
    dividend: Optional[float] = None,
) -> float:
    """Black-Scholes price of a European call or put.

    Parameters
    ----------
    kind : OptionKind or str
        ``CALL`` / ``PUT`` (``"call"`` / ``"put"`` accepted).
    strike, stock : float
        Strike and underlying price, currency per share.
    interest_rate : float
        Continuously-compounded risk-free rate, annual fraction.
    volatility : float
        Annualised volatility.
    time_to_expire : float
        Time to expiry in years.
    dividend : float, optional
        Continuous dividend yield; ``None`` means 0.

    Returns
    -------
    float
        The price.  Not clamped at zero, and ``nan`` / ``inf`` for degenerate
        inputs (zero strike, zero volatility, ...) instead of an exception.
    """
    kind = OptionKind(kind)
    dividend = dividend or 0.0
    strike, stock = float(strike), float(stock)
    interest_rate, volatility = float(interest_rate), float(volatility)
    time_to_expire, dividend = float(time_to_expire), float(dividend)

    d1, d2 = _d1_d2(strike, stock, interest_rate, volatility, time_to_expire, dividend)
    logger.debug("%s K=%s S=%s: d1=%r d2=%r", kind.value, strike, stock, d1, d2)

    disc_q = _discount(dividend, time_to_expire)
    disc_r = _discount(interest_rate, time_to_expire)
    if kind == CALL:
        return stock * disc_q * norm_cdf(d1) - strike * disc_r * norm_cdf(d2)
    return strike * disc_r * norm_cdf(-d2) - stock * disc_q * norm_cdf(-d1)


@dataclass(frozen=True)
class BlackScholesModel:
    """One European contract plus the market inputs needed to price it.

    No validation is done here, unlike the break-even / payoff helpers.
    """
    kind: OptionKind
    strike: float
    stock: float
    interest_rate: float        # continuous risk-free, annual
    volatility: float
    time_to_expire: float       # years
    dividend: Optional[float] = None

    def price(self) -> float:
        return price(self.kind, self.strike, self.stock, self.interest_rate,
                     self.volatility, self.time_to_expire, self.dividend)


