"""
CONFIG ENGINE
Load, validate, and expose the static reference tables

RESPONSIBILITIES:
- Load YAML reference files (pairs, pip values, stop-loss bands, risk levels)
- Validate configuration integrity
- Expose read-only typed objects

RULES:
❌ No defaults if a config file is missing
❌ No mutation after load
✅ Fail fast on invalid config
✅ Deterministic output
"""

import logging
import yaml
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Dict, List
from dataclasses import dataclass

from forex_risk.domain.models import (
    AccountCurrency,
    CurrencyPair,
    PairCategory,
    PipValueTable,
    RiskLevel,
    RiskLevelProfile,
    StopLossRecommendation,
    StopLossRecommendationTable,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PairUniverse:
    """Collection of all tradable currency pairs"""
    pairs: List[CurrencyPair]
    symbols: List[str]

    def get_pair(self, symbol: str) -> CurrencyPair:
        """Get currency pair by symbol"""
        for pair in self.pairs:
            if pair.symbol == symbol:
                return pair
        raise ValueError(f"Currency pair not found: {symbol}")

    def is_valid_symbol(self, symbol: str) -> bool:
        """Check if symbol is valid"""
        return symbol in self.symbols


class ConfigEngine:
    """
    Configuration Engine
    Single source of truth for the calculator reference data
    """

    def __init__(self, config_dir: Path):
        """Initialize with config directory"""
        self.config_dir = Path(config_dir)
        self._pair_universe: PairUniverse = None
        self._pip_value_table: PipValueTable = None
        self._stop_loss_table: StopLossRecommendationTable = None
        self._risk_profiles: Dict[RiskLevel, RiskLevelProfile] = None

    def load_all(self) -> None:
        """Load all configuration files"""
        self._load_pairs()
        self._load_pip_values()
        self._load_stop_loss()
        self._load_risk_levels()
        self._validate_all()
        logger.info(
            f"Reference data loaded from {self.config_dir}: "
            f"{len(self._pair_universe.pairs)} pairs, "
            f"{len(self._pip_value_table.currencies)} account currencies"
        )

    def _read_yaml(self, filename: str, description: str) -> Dict:
        config_file = self.config_dir / filename
        if not config_file.exists():
            raise FileNotFoundError(f"{description} config not found: {config_file}")

        with open(config_file, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Invalid {description} config in {config_file}: expected a mapping")
        return data

    @staticmethod
    def _require(data: Dict, key: str, description: str):
        """Required key of a config mapping"""
        if not isinstance(data, dict) or key not in data:
            raise ValueError(f"Invalid {description} config: missing '{key}'")
        return data[key]

    @staticmethod
    def _require_mapping(data: Dict, key: str, description: str) -> Dict:
        value = ConfigEngine._require(data, key, description)
        if not isinstance(value, dict):
            raise ValueError(f"Invalid {description} config: '{key}' must be a mapping")
        return value

    @staticmethod
    def _to_decimal(value, where: str) -> Decimal:
        try:
            result = Decimal(str(value))
        except InvalidOperation:
            raise ValueError(f"Invalid pip value for {where}: {value!r}") from None
        if not result.is_finite():
            raise ValueError(f"Invalid pip value for {where}: {value!r}")
        return result

    def _load_pairs(self) -> None:
        """Load currency pair universe from currency_pairs.yml"""
        data = self._read_yaml("currency_pairs.yml", "Currency pair")

        pairs = []
        for pair_data in data.get('currency_pairs', []):
            pairs.append(CurrencyPair(
                symbol=self._require(pair_data, 'symbol', "Currency pair"),
                category=PairCategory(self._require(pair_data, 'category', "Currency pair"))
            ))

        symbols = [pair.symbol for pair in pairs]

        if not symbols:
            raise ValueError("No currency pairs configured")

        # Check for duplicates
        if len(symbols) != len(set(symbols)):
            raise ValueError("Duplicate currency pair symbols found in configuration")

        self._pair_universe = PairUniverse(pairs=pairs, symbols=symbols)

    def _load_pip_values(self) -> None:
        """Load standard pip value table from pip_values.yml"""
        data = self._read_yaml("pip_values.yml", "Pip value")

        default_pip_value = self._to_decimal(data.get('default_pip_value', '10.00'), "default")

        values = {}
        for currency, by_pair in self._require_mapping(data, 'pip_values', "Pip value").items():
            if currency not in {c.value for c in AccountCurrency}:
                raise ValueError(f"Unsupported account currency in pip values: {currency}")
            if not isinstance(by_pair, dict):
                raise ValueError(f"Invalid Pip value config: '{currency}' must be a mapping")
            values[currency] = {
                pair: self._to_decimal(value, f"{currency} {pair}")
                for pair, value in by_pair.items()
            }

        self._pip_value_table = PipValueTable(
            values=values,
            default_pip_value=default_pip_value
        )

    def _load_stop_loss(self) -> None:
        """Load stop-loss recommendation bands from stop_loss.yml"""
        data = self._read_yaml("stop_loss.yml", "Stop loss")

        recommendations = {}
        bands = self._require_mapping(data, 'stop_loss_recommendations', "Stop loss")
        for level, by_pair in bands.items():
            if not isinstance(by_pair, dict):
                raise ValueError(f"Invalid Stop loss config: '{level}' must be a mapping")
            recommendations[RiskLevel(level).value] = {
                pair: StopLossRecommendation(
                    min_pips=int(self._require(band, 'min', "Stop loss")),
                    max_pips=int(self._require(band, 'max', "Stop loss")),
                    message=self._require(band, 'message', "Stop loss")
                )
                for pair, band in by_pair.items()
            }

        self._stop_loss_table = StopLossRecommendationTable(recommendations=recommendations)

    def _load_risk_levels(self) -> None:
        """Load risk level display profiles from risk_levels.yml"""
        data = self._read_yaml("risk_levels.yml", "Risk level")

        profiles = {}
        for level, profile in self._require_mapping(data, 'risk_levels', "Risk level").items():
            risk_level = RiskLevel(level)
            profiles[risk_level] = RiskLevelProfile(
                level=risk_level,
                label=self._require(profile, 'label', "Risk level"),
                color=self._require(profile, 'color', "Risk level"),
                description=self._require(profile, 'description', "Risk level")
            )

        self._risk_profiles = profiles

    def _validate_all(self) -> None:
        """Validate all configurations"""
        for currency, by_pair in self._pip_value_table.values.items():
            for symbol, value in by_pair.items():
                if not self._pair_universe.is_valid_symbol(symbol):
                    raise ValueError(f"Unknown currency pair in pip values ({currency}): {symbol}")
                if value <= Decimal('0'):
                    raise ValueError(f"Pip value must be positive: {currency} {symbol}")

        if self._pip_value_table.default_pip_value <= Decimal('0'):
            raise ValueError("Default pip value must be positive")

        for level in RiskLevel:
            if level.value not in self._stop_loss_table.recommendations:
                raise ValueError(f"Missing stop loss recommendations for risk level: {level.value}")
            if level not in self._risk_profiles:
                raise ValueError(f"Missing risk level profile: {level.value}")

        for level, by_pair in self._stop_loss_table.recommendations.items():
            for symbol in by_pair.keys():
                if not self._pair_universe.is_valid_symbol(symbol):
                    raise ValueError(f"Unknown currency pair in stop loss ({level}): {symbol}")

    # Public getters

    @property
    def pair_universe(self) -> PairUniverse:
        """Get currency pair universe"""
        if self._pair_universe is None:
            raise RuntimeError("Config not loaded. Call load_all() first")
        return self._pair_universe

    @property
    def pip_value_table(self) -> PipValueTable:
        """Get standard pip value table"""
        if self._pip_value_table is None:
            raise RuntimeError("Config not loaded. Call load_all() first")
        return self._pip_value_table

    @property
    def stop_loss_table(self) -> StopLossRecommendationTable:
        """Get stop-loss recommendation table"""
        if self._stop_loss_table is None:
            raise RuntimeError("Config not loaded. Call load_all() first")
        return self._stop_loss_table

    def get_risk_profile(self, level: RiskLevel) -> RiskLevelProfile:
        """Get display profile for a risk level"""
        if self._risk_profiles is None:
            raise RuntimeError("Config not loaded. Call load_all() first")
        return self._risk_profiles[RiskLevel(level)]

    @property
    def risk_profiles(self) -> List[RiskLevelProfile]:
        """All risk level profiles in ascending risk order"""
        if self._risk_profiles is None:
            raise RuntimeError("Config not loaded. Call load_all() first")
        return [self._risk_profiles[level] for level in RiskLevel]
