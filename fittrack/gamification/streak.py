"""
Workout streak — consecutive training days ending today (or yesterday).
"""

from __future__ import annotations

import datetime
from typing import Iterable


def compute_streak(dates: Iterable[datetime.date], today: datetime.date) -> int:
    """Length of the current streak of consecutive workout days.

    Distinct dates are walked newest first against an anchor that starts
    at *today*.  A date ``streak`` days before the anchor extends the
    streak.  If nothing has matched yet and the date is yesterday, it
    starts the streak and the anchor moves back a day, so a streak is
    kept alive until today's workout happens.  Any other gap ends the walk.

    Dates after *today* are ignored.
    """
    anchor = today
    streak = 0
    for day in sorted({d for d in dates if d <= today}, reverse=True):
        gap = (anchor - day).days
        if gap == streak:
            streak += 1
        elif streak == 0 and (today - day).days == 1:
            streak += 1
            anchor -= datetime.timedelta(days=1)
        else:
            break
    return streak
