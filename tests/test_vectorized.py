"""Tests for vectorised Black-Scholes pricing."""

import numpy as np
import pytest
from bspricer.core import CALL, PUT
from bspricer.black_scholes import price as bs_scalar
from bspricer.black_scholes_vec import bs_price_vec


class TestBSPriceVec:
    def test_single_call_matches_scalar(self):
        expected = bs_scalar(CALL, 58, 60, 0.035, 0.2, 0.5, 0.0125)
        got = bs_price_vec(CALL, 58, 60, 0.035, 0.2, 0.5, 0.0125)
        assert abs(float(got) - expected) < 1e-12

    def test_single_put_matches_scalar(self):
        expected = bs_scalar(PUT, 58, 60, 0.035, 0.2, 0.5, 0.0125)
        got = bs_price_vec("put", 58, 60, 0.035, 0.2, 0.5, 0.0125)
        assert abs(float(got) - expected) < 1e-12

    def test_array_of_strikes(self):
        strikes = np.linspace(50, 70, 21)
        prices = bs_price_vec(CALL, strikes, 60, 0.035, 0.2, 0.5)
        assert prices.shape == (21,)
        for i, K in enumerate(strikes):
            assert abs(prices[i] - bs_scalar(CALL, K, 60, 0.035, 0.2, 0.5)) < 1e-12

    def test_mixed_kinds(self):
        prices = bs_price_vec(["call", "put"], 58, 60, 0.035, 0.2, 0.5, 0.0125)
        np.testing.assert_allclose(prices, [4.556957304081674, 1.758568520665552],
                                   rtol=1e-12)

    def test_no_dividend_default(self):
        a = bs_price_vec(PUT, 58, 60, 0.035, 0.2, 0.5)
        b = bs_price_vec(PUT, 58, 60, 0.035, 0.2, 0.5, 0.0)
        assert float(a) == float(b)

    def test_degenerate_entries_are_nan(self):
        prices = bs_price_vec(CALL, 58, 60, 0.035, np.array([0.2, 0.0]), 0.5)
        assert np.isfinite(prices[0])
        assert np.isnan(prices[1])

    def test_bad_kind(self):
        with pytest.raises(ValueError):
            bs_price_vec("straddle", 58, 60, 0.035, 0.2, 0.5)

    def test_enum_kinds(self):
        prices = bs_price_vec([CALL, PUT], 58, 60, 0.035, 0.2, 0.5, 0.0125)
        np.testing.assert_allclose(prices, [4.556957304081674, 1.758568520665552],
                                   rtol=1e-12)

    def test_enum_kind_grid(self):
        kinds = np.array([[CALL, PUT], [PUT, CALL]], dtype=object)
        prices = bs_price_vec(kinds, 58, 60, 0.035, 0.2, 0.5, 0.0125)
        assert prices.shape == (2, 2)
        assert prices[0, 0] == prices[1, 1]
        assert prices[0, 1] == prices[1, 0]
