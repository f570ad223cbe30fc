from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Holiday:
    """Domain entity: a public/company holiday. Only active holidays count."""

    date: date
    name: str
    is_active: bool = True
