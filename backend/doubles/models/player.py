from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Player:
    """A roster entry. user_id is None for ad-hoc or dummy players."""

    id: str
    name: str
    user_id: Optional[str] = None
