from decimal import Decimal
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from forex_risk.domain.models import (
    AccountCurrency,
    PipValueMode,
    RiskResults,
    TradeDirection,
    TradeInputs,
)


class CalculationRequest(BaseModel):
    """Trade setup snapshot submitted for calculation"""
    account_balance: Decimal = Field(..., description="Account balance in account currency")
    account_currency: AccountCurrency = Field(AccountCurrency.USD, description="USD, EUR or GBP")
    risk_percentage: Decimal = Field(..., description="Percent of balance to risk")
    trade_direction: TradeDirection = Field(..., description="Buy or Sell")
    currency_pair: str = Field(..., description="Currency pair, e.g. EUR/USD")
    entry_price: Decimal = Field(..., description="Entry price in quote units")
    stop_loss_price: Decimal = Field(..., description="Stop loss price in quote units")
    pip_value_mode: PipValueMode = Field(PipValueMode.STANDARD, description="standard or custom")
    custom_pip_value: Decimal = Field(Decimal("10.00"), description="Per-lot pip value for custom mode")

    def to_inputs(self) -> TradeInputs:
        return TradeInputs(
            account_balance=self.account_balance,
            account_currency=self.account_currency.value,
            risk_percentage=self.risk_percentage,
            trade_direction=self.trade_direction,
            currency_pair=self.currency_pair,
            entry_price=self.entry_price,
            stop_loss_price=self.stop_loss_price,
            pip_value_mode=self.pip_value_mode,
            custom_pip_value=self.custom_pip_value,
        )

    @classmethod
    def from_inputs(cls, inputs: TradeInputs) -> "CalculationRequest":
        return cls(
            account_balance=inputs.account_balance,
            account_currency=AccountCurrency(inputs.account_currency),
            risk_percentage=inputs.risk_percentage,
            trade_direction=inputs.trade_direction,
            currency_pair=inputs.currency_pair,
            entry_price=inputs.entry_price,
            stop_loss_price=inputs.stop_loss_price,
            pip_value_mode=inputs.pip_value_mode,
            custom_pip_value=inputs.custom_pip_value,
        )


class StopRecommendationInfo(BaseModel):
    min_pips: int
    max_pips: int
    message: str


class StopAssessmentInfo(BaseModel):
    status: str
    message: str


class ProfitTargetInfo(BaseModel):
    target_price: float
    projected_profit: float


class CalculationResponse(BaseModel):
    """Risk metrics for one trade setup"""
    risk_amount: float
    stop_distance_pips: float
    pip_multiplier: int
    pip_value: float
    pip_value_mode: str
    position_size: float
    risk_level: str
    risk_level_label: str
    currency_symbol: str
    stop_recommendation: Optional[StopRecommendationInfo] = None
    stop_assessment: StopAssessmentInfo
    break_even_price: float
    profit_targets: Dict[str, ProfitTargetInfo]
    validation_errors: List[str]
    calculated_successfully: bool

    @classmethod
    def from_results(
        cls,
        inputs: TradeInputs,
        results: RiskResults,
        risk_level_label: str,
        symbol: str
    ) -> "CalculationResponse":
        recommendation = None
        if results.stop_recommendation is not None:
            recommendation = StopRecommendationInfo(
                min_pips=results.stop_recommendation.min_pips,
                max_pips=results.stop_recommendation.max_pips,
                message=results.stop_recommendation.message,
            )

        return cls(
            risk_amount=float(results.risk_amount),
            stop_distance_pips=float(results.stop_distance_pips),
            pip_multiplier=results.pip_multiplier,
            pip_value=float(results.pip_value),
            pip_value_mode=inputs.pip_value_mode.value,
            position_size=float(results.position_size),
            risk_level=results.risk_level.value,
            risk_level_label=risk_level_label,
            currency_symbol=symbol,
            stop_recommendation=recommendation,
            stop_assessment=StopAssessmentInfo(
                status=results.stop_assessment.status.value,
                message=results.stop_assessment.message,
            ),
            break_even_price=float(results.break_even_price),
            profit_targets={
                ratio: ProfitTargetInfo(
                    target_price=float(target.target_price),
                    projected_profit=float(target.projected_profit),
                )
                for ratio, target in results.profit_targets.items()
            },
            validation_errors=list(results.validation_errors),
            calculated_successfully=results.calculated_successfully,
        )


class TradeSummaryResponse(BaseModel):
    summary: str
    position_size: float
    risk_amount: float
