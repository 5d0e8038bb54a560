"""
RISK ENGINE
Turn a trade setup into position size and risk metrics

RESPONSIBILITIES:
- Validate trader inputs (collect, never raise)
- Risk amount, stop distance in pips, pip value resolution
- Position size in lots
- Risk level, stop-loss recommendation and assessment
- Profit targets at 1:1, 2:1, 3:1

RULES:
❌ No I/O, no mutation of the reference tables
❌ No exceptions for domain-invalid input
✅ Every violation collected in validation order
✅ Results always fully populated (fail-soft defaults)
✅ Deterministic output
"""

import logging
from decimal import Decimal
from typing import Dict, List

from forex_risk.domain.models import (
    PipValueMode,
    PipValueTable,
    ProfitTarget,
    RiskLevel,
    RiskResults,
    StopLossRecommendationTable,
    TradeDirection,
    TradeInputs,
    currency_symbol,
    pip_multiplier_for,
)
from forex_risk.domain.services.stop_loss_assessor import assess_stop, break_even_price

logger = logging.getLogger(__name__)


REWARD_RISK_MULTIPLIERS = (1, 2, 3)

BEGINNER_MAX_RISK_PCT = Decimal('1')
EXPERIENCED_MAX_RISK_PCT = Decimal('2')

ZERO = Decimal('0')


def _plain(value: Decimal) -> str:
    """Decimal without trailing zeros or exponent (2.0 -> 2, 0.010 -> 0.01)"""
    return format(value.normalize(), 'f')


def classify_risk_level(risk_percentage: Decimal) -> RiskLevel:
    """
    Risk band for a risk percentage

    <= 1% beginner, <= 2% experienced, otherwise expert.
    """
    if risk_percentage <= BEGINNER_MAX_RISK_PCT:
        return RiskLevel.BEGINNER
    if risk_percentage <= EXPERIENCED_MAX_RISK_PCT:
        return RiskLevel.EXPERIENCED
    return RiskLevel.EXPERT


def calculate_risk_amount(account_balance: Decimal, risk_percentage: Decimal) -> Decimal:
    """Amount of account currency put at risk"""
    return account_balance * risk_percentage / Decimal('100')


def signed_stop_distance(
    direction: TradeDirection,
    entry_price: Decimal,
    stop_loss_price: Decimal
) -> Decimal:
    """Stop distance in price units; positive when the stop is on the losing side"""
    if direction == TradeDirection.BUY:
        return entry_price - stop_loss_price
    return stop_loss_price - entry_price


def calculate_position_size(
    risk_amount: Decimal,
    stop_distance_pips: Decimal,
    pip_value: Decimal
) -> Decimal:
    """
    Lots that make the loss at the stop equal to the risk amount

    Zero when the stop distance or pip value is not positive.
    """
    if stop_distance_pips <= ZERO or pip_value <= ZERO:
        return ZERO
    return risk_amount / (stop_distance_pips * pip_value)


def calculate_profit_targets(
    entry_price: Decimal,
    stop_distance_pips: Decimal,
    direction: TradeDirection,
    position_size: Decimal,
    pip_value: Decimal,
    pip_multiplier: int
) -> Dict[str, ProfitTarget]:
    """
    Profit targets at fixed reward:risk ratios

    Returns:
        Ordered mapping "1:1", "2:1", "3:1" -> ProfitTarget
    """
    targets = {}
    for multiplier in REWARD_RISK_MULTIPLIERS:
        target_distance_pips = stop_distance_pips * multiplier
        price_distance = target_distance_pips / Decimal(pip_multiplier)

        if direction == TradeDirection.BUY:
            target_price = entry_price + price_distance
        else:
            target_price = entry_price - price_distance

        targets[f"{multiplier}:1"] = ProfitTarget(
            target_price=target_price,
            projected_profit=target_distance_pips * pip_value * position_size,
        )
    return targets


class RiskEngine:
    """
    Risk Engine
    Pure calculation over injected, read-only reference tables
    """

    def __init__(
        self,
        pip_value_table: PipValueTable,
        stop_loss_table: StopLossRecommendationTable,
        max_position_lots: Decimal = Decimal('2'),
        min_position_lots: Decimal = Decimal('0.01'),
        custom_pip_value_min: Decimal = Decimal('0.10'),
        custom_pip_value_max: Decimal = Decimal('100.00')
    ):
        """
        Initialize risk engine

        Args:
            pip_value_table: Standard pip values per account currency
            stop_loss_table: Stop-loss recommendations per risk level
            max_position_lots: Size above which a warning is raised
            min_position_lots: Smallest tradable size
            custom_pip_value_min: Lower bound for a custom pip value
            custom_pip_value_max: Upper bound for a custom pip value
        """
        self.pip_value_table = pip_value_table
        self.stop_loss_table = stop_loss_table
        self.max_position_lots = max_position_lots
        self.min_position_lots = min_position_lots
        self.custom_pip_value_min = custom_pip_value_min
        self.custom_pip_value_max = custom_pip_value_max

    def compute(self, inputs: TradeInputs) -> RiskResults:
        """
        Compute risk metrics for one trade setup

        Args:
            inputs: Trader input snapshot

        Returns:
            RiskResults (validation problems listed in validation_errors)
        """
        errors = self._validate_inputs(inputs)

        risk_amount = calculate_risk_amount(inputs.account_balance, inputs.risk_percentage)

        stop_distance = signed_stop_distance(
            inputs.trade_direction,
            inputs.entry_price,
            inputs.stop_loss_price
        )
        if stop_distance <= ZERO:
            if inputs.is_long:
                errors.append("Stop loss must be below entry price for long trades")
            else:
                errors.append("Stop loss must be above entry price for short trades")

        pip_multiplier = pip_multiplier_for(inputs.currency_pair)
        stop_distance_pips = abs(stop_distance * pip_multiplier)

        pip_value = self._resolve_pip_value(inputs, errors)

        # Wrong-side stop sizes to zero
        sizing_pips = stop_distance_pips if stop_distance > ZERO else ZERO
        position_size = calculate_position_size(risk_amount, sizing_pips, pip_value)
        errors.extend(self._validate_position_size(position_size))

        risk_level = classify_risk_level(inputs.risk_percentage)
        recommendation = self.stop_loss_table.lookup(risk_level, inputs.currency_pair)

        profit_targets = calculate_profit_targets(
            entry_price=inputs.entry_price,
            stop_distance_pips=stop_distance_pips,
            direction=inputs.trade_direction,
            position_size=position_size,
            pip_value=pip_value,
            pip_multiplier=pip_multiplier
        )

        results = RiskResults(
            risk_amount=risk_amount,
            stop_distance_pips=stop_distance_pips,
            pip_multiplier=pip_multiplier,
            pip_value=pip_value,
            position_size=position_size,
            risk_level=risk_level,
            stop_recommendation=recommendation,
            stop_assessment=assess_stop(stop_distance_pips, recommendation),
            break_even_price=break_even_price(
                inputs.entry_price,
                inputs.trade_direction,
                pip_multiplier
            ),
            profit_targets=profit_targets,
            validation_errors=errors,
        )

        logger.debug(
            f"{inputs.trade_direction.value} {inputs.currency_pair}: "
            f"risk={risk_amount} pips={stop_distance_pips} pip_value={pip_value} "
            f"size={position_size} level={risk_level.value}"
        )
        if errors:
            logger.info(f"Trade setup has {len(errors)} validation error(s): {errors}")

        return results

    def _validate_inputs(self, inputs: TradeInputs) -> List[str]:
        """Independent positivity checks, in display order"""
        errors = []

        if inputs.account_balance <= ZERO:
            errors.append("Account balance must be greater than 0")

        if inputs.risk_percentage <= ZERO:
            errors.append("Risk percentage must be greater than 0")

        if inputs.entry_price <= ZERO:
            errors.append("Entry price must be greater than 0")

        if inputs.stop_loss_price <= ZERO:
            errors.append("Stop loss price must be greater than 0")

        return errors

    def _resolve_pip_value(self, inputs: TradeInputs, errors: List[str]) -> Decimal:
        """
        Pip value per lot

        Standard mode uses the table (with its default); custom mode uses the
        trader's value even when it is out of range.
        """
        if inputs.pip_value_mode == PipValueMode.STANDARD:
            return self.pip_value_table.lookup(inputs.account_currency, inputs.currency_pair)

        pip_value = inputs.custom_pip_value
        if not self.custom_pip_value_min <= pip_value <= self.custom_pip_value_max:
            symbol = currency_symbol(inputs.account_currency)
            errors.append(
                f"Custom pip value must be between "
                f"{symbol}{self.custom_pip_value_min:.2f} and {symbol}{self.custom_pip_value_max:.2f}"
            )
        return pip_value

    def _validate_position_size(self, position_size: Decimal) -> List[str]:
        """Broker size limits, checked after sizing"""
        errors = []

        if position_size > self.max_position_lots:
            errors.append(
                f"Position size over {_plain(self.max_position_lots)} lots - consider reducing risk"
            )

        if ZERO < position_size < self.min_position_lots:
            errors.append(
                f"Position size below minimum trade size ({_plain(self.min_position_lots)} lots)"
            )

        return errors


def compute(
    inputs: TradeInputs,
    pip_value_table: PipValueTable,
    stop_loss_table: StopLossRecommendationTable
) -> RiskResults:
    """Compute risk metrics with default limits"""
    return RiskEngine(pip_value_table, stop_loss_table).compute(inputs)
