from __future__ import annotations

from enum import Enum


class MembershipStatus(str, Enum):
    ACTIVE = "active"
    BLOCKED = "blocked"

    @classmethod
    def from_flag(cls, is_deleted: bool) -> MembershipStatus:
        return cls.BLOCKED if is_deleted else cls.ACTIVE
