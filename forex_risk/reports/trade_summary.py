"""
REPORTING - TRADE SUMMARY

Human-readable trade setup block for copying into a journal or broker ticket.
"""

import logging
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from forex_risk.domain.models import (
    RiskResults,
    TradeInputs,
    currency_symbol,
    price_decimals_for,
)
from forex_risk.utils.time import format_generated

logger = logging.getLogger(__name__)


def _fixed(value: Decimal, places: int) -> str:
    """Fixed-point text, rounded half-up"""
    quantum = Decimal(1).scaleb(-places)
    return format(value.quantize(quantum, rounding=ROUND_HALF_UP), 'f')


def _as_entered(value: Decimal) -> str:
    """Number as the trader typed it (1 -> 1, 1.50 -> 1.5)"""
    return format(value.normalize(), 'f')


def generate_trade_summary(
    inputs: TradeInputs,
    results: RiskResults,
    generated_at: Optional[datetime] = None
) -> str:
    """
    Render the trade setup summary

    Args:
        inputs: Inputs the results were computed from
        results: Engine output for those inputs
        generated_at: Timestamp to stamp (default: now)

    Returns:
        Multi-line summary text
    """
    symbol = currency_symbol(inputs.account_currency)
    decimals = price_decimals_for(inputs.currency_pair)

    lines = [
        "FOREX TRADE SETUP",
        "=================",
        f"Pair: {inputs.currency_pair}",
        f"Direction: {inputs.trade_direction.value.upper()}",
        f"Entry Price: {_fixed(inputs.entry_price, decimals)}",
        f"Stop Loss: {_fixed(inputs.stop_loss_price, decimals)}",
        "",
        "RISK MANAGEMENT",
        "===============",
        f"Risk Amount: {symbol}{_fixed(results.risk_amount, 2)}",
        f"Risk %: {_as_entered(inputs.risk_percentage)}%",
        f"Stop Distance: {_fixed(results.stop_distance_pips, 1)} pips",
        f"Position Size: {_fixed(results.position_size, 2)} lots",
        "",
        "PROFIT TARGETS",
        "==============",
    ]

    for ratio, target in results.profit_targets.items():
        lines.append(
            f"{ratio} R:R - {_fixed(target.target_price, decimals)} "
            f"({symbol}{_fixed(target.projected_profit, 2)})"
        )

    lines.extend([
        "",
        f"Generated: {format_generated(generated_at)}",
    ])

    logger.debug(f"Trade summary generated for {inputs.currency_pair}")
    return "\n".join(lines)
