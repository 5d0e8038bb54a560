"""
Reference Data API Routes
Expose currency pairs, pip value tables, stop-loss bands and risk levels
"""

from fastapi import APIRouter, HTTPException
from typing import List

from forex_risk.domain.models import AccountCurrency, RiskLevel, currency_symbol
from forex_risk.domain.schemas.reference import (
    CurrencyPairInfo,
    PipValueInfo,
    RiskLevelInfo,
    StopLossBandInfo,
    StopLossTableInfo,
)

router = APIRouter()


def _get_config_engine():
    from forex_risk.main import config_engine

    if config_engine is None:
        raise HTTPException(status_code=500, detail="Configuration not loaded")
    return config_engine


@router.get("/pairs", response_model=List[CurrencyPairInfo])
async def get_pairs():
    """
    Get list of all tradable currency pairs
    """
    config_engine = _get_config_engine()

    return [
        CurrencyPairInfo(
            symbol=pair.symbol,
            category=pair.category.value,
            pip_multiplier=pair.pip_multiplier,
        )
        for pair in config_engine.pair_universe.pairs
    ]


@router.get("/pip-values/{currency}", response_model=PipValueInfo)
async def get_pip_values(currency: str):
    """
    Get standard per-lot pip values for an account currency
    """
    config_engine = _get_config_engine()
    currency = currency.upper()

    if currency not in {c.value for c in AccountCurrency}:
        raise HTTPException(status_code=404, detail=f"Unsupported account currency: {currency}")

    table = config_engine.pip_value_table
    try:
        values = table.for_currency(currency)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e.args[0]))

    return PipValueInfo(
        account_currency=currency,
        currency_symbol=currency_symbol(currency),
        default_pip_value=float(table.default_pip_value),
        pip_values={pair: float(value) for pair, value in values.items()},
    )


@router.get("/risk-levels", response_model=List[RiskLevelInfo])
async def get_risk_levels():
    """
    Get risk level display profiles, lowest risk first
    """
    config_engine = _get_config_engine()

    return [
        RiskLevelInfo(
            level=profile.level.value,
            label=profile.label,
            color=profile.color,
            description=profile.description,
        )
        for profile in config_engine.risk_profiles
    ]


@router.get("/stop-loss/{risk_level}", response_model=StopLossTableInfo)
async def get_stop_loss_recommendations(risk_level: str):
    """
    Get recommended stop distance bands for a risk level
    """
    config_engine = _get_config_engine()

    try:
        level = RiskLevel(risk_level.lower())
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown risk level: {risk_level}")

    bands = config_engine.stop_loss_table.for_level(level)

    return StopLossTableInfo(
        risk_level=level.value,
        recommendations={
            pair: StopLossBandInfo(
                min_pips=band.min_pips,
                max_pips=band.max_pips,
                message=band.message,
            )
            for pair, band in bands.items()
        },
    )
