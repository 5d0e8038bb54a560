"""
Domain Models Package
Export all domain entities
"""

from .entities import (
    # Constants
    CURRENCY_SYMBOLS,
    DEFAULT_PIP_VALUE,

    # Enums
    AccountCurrency,
    PairCategory,
    PipValueMode,
    RiskLevel,
    StopStatus,
    TradeDirection,

    # Entities
    CurrencyPair,
    PipValueTable,
    ProfitTarget,
    RiskLevelProfile,
    RiskResults,
    StopAssessment,
    StopLossRecommendation,
    StopLossRecommendationTable,
    TradeInputs,

    # Helpers
    currency_symbol,
    enum_key,
    pip_multiplier_for,
    price_decimals_for,
)

__all__ = [
    # Constants
    "CURRENCY_SYMBOLS",
    "DEFAULT_PIP_VALUE",

    # Enums
    "AccountCurrency",
    "PairCategory",
    "PipValueMode",
    "RiskLevel",
    "StopStatus",
    "TradeDirection",

    # Entities
    "CurrencyPair",
    "PipValueTable",
    "ProfitTarget",
    "RiskLevelProfile",
    "RiskResults",
    "StopAssessment",
    "StopLossRecommendation",
    "StopLossRecommendationTable",
    "TradeInputs",

    # Helpers
    "currency_symbol",
    "enum_key",
    "pip_multiplier_for",
    "price_decimals_for",
]
