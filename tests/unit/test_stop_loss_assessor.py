from decimal import Decimal

import pytest

from forex_risk.domain.models import StopLossRecommendation, StopStatus, TradeDirection
from forex_risk.domain.services.stop_loss_assessor import assess_stop, break_even_price


@pytest.fixture
def band():
    return StopLossRecommendation(min_pips=40, max_pips=60, message="Wider stops help avoid market noise while learning")


@pytest.mark.unit
@pytest.mark.parametrize("pips,status,message", [
    (Decimal('39.9'), StopStatus.TIGHT, "Stop too tight - may get stopped by market noise"),
    (Decimal('40'), StopStatus.GOOD, "Within recommended range"),
    (Decimal('50'), StopStatus.GOOD, "Within recommended range"),
    (Decimal('60'), StopStatus.GOOD, "Within recommended range"),
    (Decimal('60.1'), StopStatus.WIDE, "Stop very wide - consider reducing position size"),
])
def test_assess_stop_against_band(band, pips, status, message):
    assessment = assess_stop(pips, band)

    assert assessment.status == status
    assert assessment.message == message


@pytest.mark.unit
def test_assess_stop_without_recommendation():
    assessment = assess_stop(Decimal('50'), None)

    assert assessment.status == StopStatus.UNKNOWN
    assert assessment.message == "No recommendation available"


@pytest.mark.unit
@pytest.mark.parametrize("direction,multiplier,entry,expected", [
    (TradeDirection.BUY, 10000, Decimal('1.0850'), Decimal('1.0851')),
    (TradeDirection.SELL, 10000, Decimal('1.0850'), Decimal('1.0849')),
    (TradeDirection.BUY, 100, Decimal('150.00'), Decimal('150.01')),
    (TradeDirection.SELL, 100, Decimal('150.00'), Decimal('149.99')),
])
def test_break_even_price_one_pip_spread(direction, multiplier, entry, expected):
    assert break_even_price(entry, direction, multiplier) == expected


@pytest.mark.unit
def test_recommendation_rejects_inverted_band():
    with pytest.raises(ValueError, match="cannot exceed"):
        StopLossRecommendation(min_pips=60, max_pips=40, message="bad")
