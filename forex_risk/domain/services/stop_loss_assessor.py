"""
STOP LOSS ASSESSOR
Judge a stop distance against the recommended band

RESPONSIBILITIES:
- Classify stop distance as good / tight / wide
- Compute break-even price including a one pip spread

RULES:
❌ No position sizing
✅ Missing recommendation is reported, never raised
✅ Band boundaries are inclusive
"""

from decimal import Decimal
from typing import Optional

from forex_risk.domain.models import (
    StopAssessment,
    StopLossRecommendation,
    StopStatus,
    TradeDirection,
)


MESSAGES = {
    StopStatus.GOOD: "Within recommended range",
    StopStatus.TIGHT: "Stop too tight - may get stopped by market noise",
    StopStatus.WIDE: "Stop very wide - consider reducing position size",
    StopStatus.UNKNOWN: "No recommendation available",
}


def assess_stop(
    stop_distance_pips: Decimal,
    recommendation: Optional[StopLossRecommendation]
) -> StopAssessment:
    """
    Compare a stop distance with its recommendation

    Args:
        stop_distance_pips: Stop distance in pips
        recommendation: Band for (risk level, pair), None if unknown

    Returns:
        StopAssessment
    """
    if recommendation is None:
        status = StopStatus.UNKNOWN
    elif stop_distance_pips < recommendation.min_pips:
        status = StopStatus.TIGHT
    elif stop_distance_pips > recommendation.max_pips:
        status = StopStatus.WIDE
    else:
        status = StopStatus.GOOD

    return StopAssessment(status=status, message=MESSAGES[status])


def break_even_price(
    entry_price: Decimal,
    direction: TradeDirection,
    pip_multiplier: int
) -> Decimal:
    """Entry price moved one pip (typical spread) in the trade's favour"""
    spread = Decimal(1) / Decimal(pip_multiplier)
    if direction == TradeDirection.BUY:
        return entry_price + spread
    return entry_price - spread
