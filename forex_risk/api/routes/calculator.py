"""
Calculator API Routes
Position sizing, risk metrics and trade summary
"""

import logging

from fastapi import APIRouter, HTTPException

from forex_risk.domain.models import TradeInputs, currency_symbol
from forex_risk.domain.schemas.calculator import (
    CalculationRequest,
    CalculationResponse,
    TradeSummaryResponse,
)
from forex_risk.reports.trade_summary import generate_trade_summary

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_engines():
    from forex_risk.main import config_engine, risk_engine

    if config_engine is None or risk_engine is None:
        raise HTTPException(status_code=500, detail="Configuration not loaded")
    return config_engine, risk_engine


@router.get("/defaults", response_model=CalculationRequest)
async def get_defaults():
    """
    Starting trade setup (what the calculator resets to)
    """
    return CalculationRequest.from_inputs(TradeInputs.defaults())


@router.post("/calculate", response_model=CalculationResponse)
async def calculate(request: CalculationRequest):
    """
    Calculate position size and risk metrics

    Domain problems (wrong-side stop, size limits, ...) come back in
    `validation_errors`; the response is always fully populated.
    """
    config_engine, risk_engine = _get_engines()

    inputs = request.to_inputs()
    results = risk_engine.compute(inputs)
    profile = config_engine.get_risk_profile(results.risk_level)

    return CalculationResponse.from_results(
        inputs=inputs,
        results=results,
        risk_level_label=profile.label,
        symbol=currency_symbol(inputs.account_currency),
    )


@router.post("/summary", response_model=TradeSummaryResponse)
async def trade_summary(request: CalculationRequest):
    """
    Text summary of an actionable trade setup

    Rejected with 422 while the setup has validation errors or no size.
    """
    _, risk_engine = _get_engines()

    inputs = request.to_inputs()
    results = risk_engine.compute(inputs)

    if not results.calculated_successfully:
        logger.info(f"Summary refused for {inputs.currency_pair}: {results.validation_errors}")
        raise HTTPException(
            status_code=422,
            detail={
                "message": "Trade setup is not actionable",
                "validation_errors": results.validation_errors,
            }
        )

    return TradeSummaryResponse(
        summary=generate_trade_summary(inputs, results),
        position_size=float(results.position_size),
        risk_amount=float(results.risk_amount),
    )
