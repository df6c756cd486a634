# bspricer — Black-Scholes pricing for European vanilla options
# Public API

# Data model & error taxonomy
from .core import (
    OptionKind, Position, CALL, PUT, LONG, SHORT,
    MathError, NonPositiveStrike, NonPositiveStock, NonPositivePremium,
)

# Normal CDF approximation
from .normal import norm_cdf, norm_cdf_vec, approximation_error

# Pricing engine
from .black_scholes import BlackScholesModel, price as bs_price
from .black_scholes_vec import bs_price_vec

# Break-even / payoff
from .valuation import break_even_point, payoff, payoff_vec

__all__ = [
    # Data model
    "OptionKind", "Position", "CALL", "PUT", "LONG", "SHORT",
    # Errors
    "MathError", "NonPositiveStrike", "NonPositiveStock", "NonPositivePremium",
    # Normal CDF
    "norm_cdf", "norm_cdf_vec", "approximation_error",
    # Pricing
    "BlackScholesModel", "bs_price", "bs_price_vec",
    # Valuation
    "break_even_point", "payoff", "payoff_vec",
]

__version__ = "0.1.0"
