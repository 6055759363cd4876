from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import JustificationStatus


@dataclass(frozen=True)
class Justification:
    user_id: str
    status: JustificationStatus
    start_date: Optional[date]
    end_date: Optional[date] = None
    time: Optional[str] = None
    reason: str = ""
    details: str = ""
    attachment: Optional[str] = None
    submitted_at: Optional[datetime] = None
    justification_id: Optional[str] = None
