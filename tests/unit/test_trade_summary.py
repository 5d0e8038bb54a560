from datetime import datetime
from decimal import Decimal

import pytest

from forex_risk.domain.models import TradeDirection, TradeInputs
from forex_risk.reports.trade_summary import generate_trade_summary


GENERATED_AT = datetime(2026, 10, 19, 14, 5, 9)


@pytest.mark.unit
def test_summary_eur_usd_long(risk_engine):
    inputs = TradeInputs.defaults()
    results = risk_engine.compute(inputs)

    summary = generate_trade_summary(inputs, results, generated_at=GENERATED_AT)

    assert summary == "\n".join([
        "FOREX TRADE SETUP",
        "=================",
        "Pair: EUR/USD",
        "Direction: BUY",
        "Entry Price: 1.08500",
        "Stop Loss: 1.08000",
        "",
        "RISK MANAGEMENT",
        "===============",
        "Risk Amount: $100.00",
        "Risk %: 1%",
        "Stop Distance: 50.0 pips",
        "Position Size: 0.20 lots",
        "",
        "PROFIT TARGETS",
        "==============",
        "1:1 R:R - 1.09000 ($100.00)",
        "2:1 R:R - 1.09500 ($200.00)",
        "3:1 R:R - 1.10000 ($300.00)",
        "",
        "Generated: 10/19/2026, 02:05:09 PM",
    ])


@pytest.mark.unit
def test_summary_jpy_short_in_gbp(risk_engine):
    inputs = TradeInputs(
        account_balance=Decimal('5000'),
        account_currency="GBP",
        risk_percentage=Decimal('1.5'),
        trade_direction=TradeDirection.SELL,
        currency_pair="GBP/JPY",
        entry_price=Decimal('190.25'),
        stop_loss_price=Decimal('190.75'),
    )
    results = risk_engine.compute(inputs)

    lines = generate_trade_summary(inputs, results, generated_at=GENERATED_AT).split("\n")

    assert "Direction: SELL" in lines
    assert "Entry Price: 190.250" in lines
    assert "Stop Loss: 190.750" in lines
    assert "Risk Amount: £75.00" in lines
    assert "Risk %: 1.5%" in lines
    assert "Stop Distance: 50.0 pips" in lines
    # 75 / (50 * 10.00) = 0.15 lots
    assert "Position Size: 0.15 lots" in lines
    assert "1:1 R:R - 189.750 (£75.00)" in lines
    assert "3:1 R:R - 188.750 (£225.00)" in lines


@pytest.mark.unit
def test_summary_rounds_half_up(risk_engine):
    inputs = TradeInputs(
        account_balance=Decimal('10000'),
        account_currency="USD",
        risk_percentage=Decimal('1'),
        trade_direction=TradeDirection.BUY,
        currency_pair="USD/JPY",
        entry_price=Decimal('150.00'),
        stop_loss_price=Decimal('149.50'),
    )
    results = risk_engine.compute(inputs)

    summary = generate_trade_summary(inputs, results, generated_at=GENERATED_AT)

    # 100 / (50 * 9.00) = 0.2222... lots
    assert "Position Size: 0.22 lots" in summary
    assert "($100.00)" in summary
