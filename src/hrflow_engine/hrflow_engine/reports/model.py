from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Read-model of the employee columns a report needs."""

    user_id: int
    name: str
    email: Optional[str] = None
    department: Optional[str] = None
    position: Optional[str] = None


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    summary: list[dict]
