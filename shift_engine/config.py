"""Pay configuration and its settings file.

`PayConfig` is passed explicitly into every normalization run; changing it only
affects shifts normalized afterwards. The settings file uses the same camelCase
keys the web front end stores (`payRates`, `takeHomePercent`, `serverUrl`).
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError


logger = logging.getLogger(__name__)

DEFAULT_PAY_RATES: Dict[str, float] = {"walmart": 13.87, "canes": 14.25}
DEFAULT_TAKE_HOME_PERCENT = 87.0


class PayConfig(BaseModel):
    """Hourly rate per source and the take-home fraction.

    Values are not range-checked; negative rates or percentages above 100 are
    passed through as given.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    pay_rates: Dict[str, float] = Field(
        default_factory=lambda: dict(DEFAULT_PAY_RATES),
        alias="payRates",
        description="Hourly rate keyed by source name.",
    )
    take_home_percent: float = Field(
        default=DEFAULT_TAKE_HOME_PERCENT,
        alias="takeHomePercent",
        description="Share of gross pay kept after deductions, 0-100.",
    )
    server_url: str = Field(default="", alias="serverUrl")

    def rate_for(self, source: str) -> float:
        return float(self.pay_rates.get(source, 0.0) or 0.0)

    @property
    def take_home_multiplier(self) -> float:
        return self.take_home_percent / 100.0


def load_settings(path: Union[str, Path]) -> PayConfig:
    """Read settings from JSON, falling back to defaults for anything missing."""
    p = Path(path).expanduser()
    if not p.exists():
        return PayConfig()

    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("Could not read settings from %s: %s", p, exc)
        return PayConfig()

    if not isinstance(data, dict):
        logger.warning("Ignoring settings in %s: expected a JSON object", p)
        return PayConfig()

    # A zero or missing percentage means "never set" in the stored settings.
    if not data.get("takeHomePercent"):
        data.pop("takeHomePercent", None)
    if not data.get("payRates"):
        data.pop("payRates", None)

    try:
        return PayConfig.model_validate(data)
    except ValidationError as exc:
        logger.warning("Invalid settings in %s, using defaults: %s", p, exc)
        return PayConfig()


def save_settings(config: PayConfig, path: Union[str, Path]) -> Path:
    p = Path(path).expanduser().resolve()
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(config.model_dump(by_alias=True), indent=2), encoding="utf-8")
    return p
