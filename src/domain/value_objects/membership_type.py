from __future__ import annotations

from enum import Enum

from dateutil.relativedelta import relativedelta


class MembershipType(str, Enum):
    MONTHLY_MEMBER = "MonthlyMember"
    ANNUAL_MEMBER = "AnnualMember"
    CREATOR = "Creator"

    def term(self) -> relativedelta:
        """Calendar length of one paid period for this plan."""
        if self is MembershipType.MONTHLY_MEMBER:
            return relativedelta(months=1)
        if self is MembershipType.ANNUAL_MEMBER:
            return relativedelta(years=1)
        return relativedelta(months=2)
