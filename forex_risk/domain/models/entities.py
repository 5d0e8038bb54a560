"""
Domain Models - Entities
Pure domain objects with no infrastructure dependencies
"""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Dict, List, Optional, Union


DEFAULT_PIP_VALUE = Decimal('10.00')

JPY_PIP_MULTIPLIER = 100
STANDARD_PIP_MULTIPLIER = 10000

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
}


class AccountCurrency(str, Enum):
    """Supported account currencies"""
    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"


class TradeDirection(str, Enum):
    """Direction of the trade"""
    BUY = "Buy"
    SELL = "Sell"


class PipValueMode(str, Enum):
    """Where the per-lot pip value comes from"""
    STANDARD = "standard"
    CUSTOM = "custom"


class PairCategory(str, Enum):
    """Currency pair category"""
    MAJOR = "major"
    CROSS = "cross"


class RiskLevel(str, Enum):
    """Trader risk band, ordered by ascending risk"""
    BEGINNER = "beginner"
    EXPERIENCED = "experienced"
    EXPERT = "expert"


class StopStatus(str, Enum):
    """Stop distance compared to the recommended band"""
    GOOD = "good"
    TIGHT = "tight"
    WIDE = "wide"
    UNKNOWN = "unknown"


def enum_key(value: Union[str, Enum]) -> str:
    """Plain string key for table lookups (str enums hash by name, not value)"""
    if isinstance(value, Enum):
        return value.value
    return value


def pip_multiplier_for(pair: Union[str, Enum]) -> int:
    """Price-to-pip multiplier: 100 for JPY pairs, 10000 otherwise"""
    return JPY_PIP_MULTIPLIER if "JPY" in enum_key(pair) else STANDARD_PIP_MULTIPLIER


def price_decimals_for(pair: Union[str, Enum]) -> int:
    """Display precision for quotes: 3 decimals for JPY pairs, 5 otherwise"""
    return 3 if "JPY" in enum_key(pair) else 5


def currency_symbol(currency: Union[str, Enum]) -> str:
    """Display symbol for an account currency (defaults to $)"""
    return CURRENCY_SYMBOLS.get(enum_key(currency), "$")


def _to_decimal(name: str, value) -> Decimal:
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value))
        except InvalidOperation:
            raise ValueError(f"{name} must be numeric, got {value!r}") from None
    if not result.is_finite():
        raise ValueError(f"{name} must be a finite number, got {value!r}")
    return result


@dataclass(frozen=True)
class CurrencyPair:
    """Tradable currency pair - Immutable"""
    symbol: str
    category: PairCategory

    def __post_init__(self):
        if not self.symbol:
            raise ValueError("Currency pair symbol cannot be empty")

    @property
    def pip_multiplier(self) -> int:
        return pip_multiplier_for(self.symbol)


@dataclass(frozen=True)
class RiskLevelProfile:
    """Display profile of a risk band"""
    level: RiskLevel
    label: str
    color: str
    description: str


@dataclass(frozen=True)
class StopLossRecommendation:
    """Recommended stop distance band for one pair at one risk level"""
    min_pips: int
    max_pips: int
    message: str

    def __post_init__(self):
        if self.min_pips < 0:
            raise ValueError("Recommended minimum pips cannot be negative")
        if self.min_pips > self.max_pips:
            raise ValueError("Recommended minimum pips cannot exceed maximum pips")


@dataclass(frozen=True)
class PipValueTable:
    """
    Per-lot pip values keyed by account currency -> currency pair.

    A (currency, pair) combination that is not in the table resolves to
    the default pip value (10.00).
    """
    values: Dict[str, Dict[str, Decimal]]
    default_pip_value: Decimal = DEFAULT_PIP_VALUE

    def lookup(self, account_currency: Union[str, Enum], currency_pair: Union[str, Enum]) -> Decimal:
        """Pip value for the combination, falling back to the default"""
        by_pair = self.values.get(enum_key(account_currency), {})
        return by_pair.get(enum_key(currency_pair), self.default_pip_value)

    def for_currency(self, account_currency: Union[str, Enum]) -> Dict[str, Decimal]:
        """All pip values for one account currency"""
        key = enum_key(account_currency)
        if key not in self.values:
            raise KeyError(f"No pip values for account currency: {key}")
        return dict(self.values[key])

    @property
    def currencies(self) -> List[str]:
        return list(self.values.keys())


@dataclass(frozen=True)
class StopLossRecommendationTable:
    """Stop-loss recommendations keyed by risk level -> currency pair"""
    recommendations: Dict[str, Dict[str, StopLossRecommendation]]

    def lookup(
        self,
        risk_level: Union[str, Enum],
        currency_pair: Union[str, Enum]
    ) -> Optional[StopLossRecommendation]:
        """Recommendation for the combination, or None for an unknown pair"""
        by_pair = self.recommendations.get(enum_key(risk_level), {})
        return by_pair.get(enum_key(currency_pair))

    def for_level(self, risk_level: Union[str, Enum]) -> Dict[str, StopLossRecommendation]:
        """All recommendations for one risk level"""
        key = enum_key(risk_level)
        if key not in self.recommendations:
            raise KeyError(f"No stop loss recommendations for risk level: {key}")
        return dict(self.recommendations[key])


@dataclass(frozen=True)
class TradeInputs:
    """
    Snapshot of trader inputs for one computation - Immutable

    Numeric fields are coerced to Decimal. Non-numeric or non-finite values
    (NaN, infinity) raise ValueError. Domain-invalid values (negative
    balance, stop on the wrong side, ...) are accepted here and reported by
    the risk engine as validation errors.
    """
    account_balance: Decimal
    account_currency: str
    risk_percentage: Decimal
    trade_direction: TradeDirection
    currency_pair: str
    entry_price: Decimal
    stop_loss_price: Decimal
    pip_value_mode: PipValueMode = PipValueMode.STANDARD
    custom_pip_value: Decimal = Decimal('10.00')

    def __post_init__(self):
        for name in (
            'account_balance',
            'risk_percentage',
            'entry_price',
            'stop_loss_price',
            'custom_pip_value',
        ):
            object.__setattr__(self, name, _to_decimal(name, getattr(self, name)))

        object.__setattr__(self, 'account_currency', enum_key(self.account_currency))
        object.__setattr__(self, 'currency_pair', enum_key(self.currency_pair))
        object.__setattr__(self, 'trade_direction', TradeDirection(self.trade_direction))
        object.__setattr__(self, 'pip_value_mode', PipValueMode(self.pip_value_mode))

    @property
    def is_long(self) -> bool:
        return self.trade_direction == TradeDirection.BUY

    @classmethod
    def defaults(cls) -> "TradeInputs":
        """Starting snapshot used when the calculator is reset"""
        return cls(
            account_balance=Decimal('10000'),
            account_currency=AccountCurrency.USD.value,
            risk_percentage=Decimal('1'),
            trade_direction=TradeDirection.BUY,
            currency_pair="EUR/USD",
            entry_price=Decimal('1.0850'),
            stop_loss_price=Decimal('1.0800'),
            pip_value_mode=PipValueMode.STANDARD,
            custom_pip_value=Decimal('10.00'),
        )


@dataclass(frozen=True)
class ProfitTarget:
    """Take-profit level at a fixed reward:risk ratio"""
    target_price: Decimal
    projected_profit: Decimal


@dataclass(frozen=True)
class StopAssessment:
    """Quality of the stop distance against its recommendation"""
    status: StopStatus
    message: str


@dataclass(frozen=True)
class RiskResults:
    """Output of one risk computation - Immutable snapshot"""
    risk_amount: Decimal
    stop_distance_pips: Decimal
    pip_multiplier: int
    pip_value: Decimal
    position_size: Decimal
    risk_level: RiskLevel
    stop_recommendation: Optional[StopLossRecommendation]
    stop_assessment: StopAssessment
    break_even_price: Decimal
    profit_targets: Dict[str, ProfitTarget] = field(default_factory=dict)
    validation_errors: List[str] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return len(self.validation_errors) > 0

    @property
    def calculated_successfully(self) -> bool:
        """Results are actionable: no validation errors and a tradable size"""
        return not self.has_errors and self.position_size > Decimal('0')
