import datetime as dt

import pytest

from shift_engine.config import PayConfig
from shift_engine.models import Shift


@pytest.fixture()
def config() -> PayConfig:
    return PayConfig(pay_rates={"walmart": 13.87, "canes": 14.25}, take_home_percent=87)


@pytest.fixture()
def make_shift():
    def _make(day: dt.date, start: str, end: str, source: str = "walmart", paid: float = 0.0, gross: float = 0.0, net: float = 0.0) -> Shift:
        return Shift(
            date=day,
            start=start,
            end=end,
            duration_hours=paid,
            paid_hours=paid,
            gross_pay=gross,
            net_pay=net,
            job="Test Shift",
            source=source,
        )

    return _make
