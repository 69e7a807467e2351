from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Profile:
    """사용자 프로필."""

    id: str
    username: Optional[str] = None
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    bio: Optional[str] = None
    website: Optional[str] = None

    followers_count: int = 0
    following_count: int = 0
    updated_at: Optional[datetime] = None
