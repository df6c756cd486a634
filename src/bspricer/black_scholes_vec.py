# black_scholes_vec.py
# Vectorised Black-Scholes pricing.
# All public functions accept scalars *or* NumPy arrays and broadcast.
# Results agree with the scalar engine to rounding, not bit for bit.

from __future__ import annotations
import numpy as np

from .core import OptionKind
from .normal import norm_cdf_vec as _N

__all__ = ["bs_price_vec"]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------
def _d1_d2(K, S, r, sigma, T, q):
    """Compute d1, d2 arrays with the same grouping as the scalar engine."""
    sqrt_T = np.sqrt(T)
    d1 = np.log(S / K) + r - q + sigma * sigma / 2.0 * T / sigma * sqrt_T
    d2 = d1 - sigma * sqrt_T
    return d1, d2


def _is_call(kind) -> np.ndarray:
    """Return boolean mask: True where kind == 'call'.

    Elements stay Python objects so ``OptionKind`` members are read by value,
    not through ``str()``.
    """
    if isinstance(kind, str):
        return np.bool_(_kind_str(kind) == "call")
    kind = np.asarray(kind, dtype=object)
    return np.array([_kind_str(k) == "call" for k in kind.flat],
                    dtype=bool).reshape(kind.shape)


def _kind_str(k) -> str:
    s = k.value if isinstance(k, OptionKind) else str(k).lower()
    if s not in ("call", "put"):
        raise ValueError(f"kind must be 'call' or 'put', got {k!r}")
    return s


# ---------------------------------------------------------------------------
# Vectorised price
# ---------------------------------------------------------------------------
def bs_price_vec(kind, K, S, r, sigma, T, q=None) -> np.ndarray:
    """Vectorised Black-Scholes price.

    Argument order follows :func:`bspricer.black_scholes.price`:
    kind, strike, stock, rate, volatility, time, dividend.  ``q=None`` means
    no dividend.  Degenerate entries come back as ``nan`` / ``inf``.

    Returns
    -------
    np.ndarray
        Option prices (same shape as broadcasted inputs).
    """
    if q is None:
        q = 0.0
    K, S, r, sigma, T, q = (np.asarray(x, dtype=float) for x in (K, S, r, sigma, T, q))
    with np.errstate(all="ignore"):
        d1, d2 = _d1_d2(K, S, r, sigma, T, q)
        disc_r = np.exp(-r * T)
        disc_q = np.exp(-q * T)

        call_px = S * disc_q * _N(d1) - K * disc_r * _N(d2)
        put_px  = K * disc_r * _N(-d2) - S * disc_q * _N(-d1)

    return np.where(_is_call(kind), call_px, put_px)
