"""Base classes for source connectors."""

from __future__ import annotations

import datetime as dt
from abc import ABC, abstractmethod
from typing import Any, List

from ..config import PayConfig
from ..models import Shift


class ShiftSource(ABC):
    """Abstract base class for a schedule source.

    A source picks its own branch out of the combined payload and maps each
    record onto `Shift`. A missing or wrong-shaped branch yields an empty list.
    """

    name: str

    @abstractmethod
    def normalize(self, payload: Any, config: PayConfig, today: dt.date) -> List[Shift]:
        """Return normalized shifts for this source's branch of `payload`."""
        raise NotImplementedError
