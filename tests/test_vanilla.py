"""
Tests for European and Europeans
"""
import pytest
from hypothesis import given
from hypothesis import strategies as st

from products import ConfigurationError, European, Europeans, Snapshot


def european_path(forward, discount=0.99, numeraire=1.0):
    return [Snapshot(forwards=[forward], discounts=[discount], numeraire=numeraire)]


class TestEuropean:

    def test_in_the_money(self, european):
        assert european.evaluate(european_path(110.0)) == pytest.approx([9.9])

    def test_out_of_the_money(self, european):
        assert european.evaluate(european_path(90.0)) == [0.0]

    def test_numeraire_discounting(self, european):
        assert european.evaluate(european_path(110.0, 1.0, 2.0)) == pytest.approx([5.0])

    def test_timeline_and_dataline(self):
        option = European(100.0, 1.0, 1.25)
        assert option.timeline == (1.0,)
        requirement, = option.dataline
        assert requirement.numeraire is True
        assert requirement.forward_maturities == (1.25,)
        assert requirement.discount_maturities == (1.25,)
        assert requirement.rate_definitions == ()

    def test_settlement_defaults_to_exercise(self, european):
        assert european.settlement_date == european.exercise_date
        assert european.dataline[0].forward_maturities == (1.0,)

    def test_labels(self):
        assert European(100.0, 1.0).payoff_labels == ("call 100.00 1.00",)
        assert European(100.0, 1.0, 1.25).payoff_labels == ("call 100.00 1.00 1.25",)

    def test_settlement_before_exercise(self):
        with pytest.raises(ConfigurationError, match="settlement"):
            European(100.0, 1.0, 0.5)

    def test_contract_type(self, european):
        assert european.contract_type == "european_call"
        assert "K=100.0" in repr(european)

    @given(
        f1=st.floats(min_value=0.0, max_value=500.0),
        f2=st.floats(min_value=0.0, max_value=500.0),
        strike=st.floats(min_value=0.0, max_value=500.0),
    )
    def test_increasing_in_forward(self, f1, f2, strike):
        lo, hi = sorted((f1, f2))
        option = European(strike, 1.0)
        assert option.evaluate(european_path(hi))[0] >= option.evaluate(european_path(lo))[0]

    @given(
        k1=st.floats(min_value=0.0, max_value=500.0),
        k2=st.floats(min_value=0.0, max_value=500.0),
        forward=st.floats(min_value=0.0, max_value=500.0),
    )
    def test_decreasing_in_strike(self, k1, k2, forward):
        lo, hi = sorted((k1, k2))
        path = european_path(forward)
        assert European(hi, 1.0).evaluate(path)[0] <= European(lo, 1.0).evaluate(path)[0]


class TestEuropeans:

    def test_timeline_sorted(self, europeans):
        assert europeans.timeline == (1.0, 2.0)
        assert europeans.maturities == (1.0, 2.0)

    def test_strikes_follow_maturities(self, europeans):
        assert europeans.strikes == ((100.0,), (90.0, 110.0))

    def test_dataline(self, europeans):
        assert [r.numeraire for r in europeans.dataline] == [True, True]
        assert [r.forward_maturities for r in europeans.dataline] == [(1.0,), (2.0,)]

    def test_labels_maturity_major(self, europeans):
        assert europeans.payoff_labels == (
            "call 1.00 100.00",
            "call 2.00 90.00",
            "call 2.00 110.00",
        )

    def test_payoffs_maturity_major(self, europeans):
        path = [
            Snapshot(forwards=[105.0], numeraire=1.0),
            Snapshot(forwards=[100.0], numeraire=2.0),
        ]
        assert europeans.evaluate(path) == pytest.approx([5.0, 5.0, 0.0])

    def test_strike_order_preserved(self):
        book = Europeans({1.0: [110.0, 90.0, 100.0]})
        path = [Snapshot(forwards=[105.0], numeraire=1.0)]
        assert book.evaluate(path) == pytest.approx([0.0, 15.0, 5.0])

    def test_empty_book(self):
        with pytest.raises(ConfigurationError):
            Europeans({})
