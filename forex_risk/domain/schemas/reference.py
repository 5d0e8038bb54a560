from pydantic import BaseModel
from typing import Dict


class CurrencyPairInfo(BaseModel):
    symbol: str
    category: str
    pip_multiplier: int


class PipValueInfo(BaseModel):
    account_currency: str
    currency_symbol: str
    default_pip_value: float
    pip_values: Dict[str, float]


class RiskLevelInfo(BaseModel):
    level: str
    label: str
    color: str
    description: str


class StopLossBandInfo(BaseModel):
    min_pips: int
    max_pips: int
    message: str


class StopLossTableInfo(BaseModel):
    risk_level: str
    recommendations: Dict[str, StopLossBandInfo]
