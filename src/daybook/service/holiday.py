# SPDX-License-Identifier: MIT

from typing import Mapping, Optional

import pendulum

from daybook.time import date_to_key

# Holidays on the same month-day every year, keyed by "MM-DD"
FIXED_HOLIDAYS: dict[str, str] = {
    "01-01": "New Year's Day",
    "03-01": "Independence Movement Day",
    "05-05": "Children's Day",
    "06-06": "Memorial Day",
    "08-15": "Liberation Day",
    "10-03": "National Foundation Day",
    "10-09": "Hangul Day",
    "12-25": "Christmas",
}

# Lunar calendar and substitute holidays, keyed by "YYYY-MM-DD".
# Hand maintained: years missing here report no lunar holidays.
DATED_HOLIDAYS: dict[str, str] = {
    # 2024
    "2024-02-09": "Lunar New Year's Eve",
    "2024-02-10": "Lunar New Year",
    "2024-02-11": "Lunar New Year Holiday",
    "2024-05-06": "Substitute Holiday",
    "2024-05-15": "Buddha's Birthday",
    "2024-09-16": "Chuseok Eve",
    "2024-09-17": "Chuseok",
    "2024-09-18": "Chuseok Holiday",
    # 2025
    "2025-01-28": "Lunar New Year's Eve",
    "2025-01-29": "Lunar New Year",
    "2025-01-30": "Lunar New Year Holiday",
    "2025-03-03": "Substitute Holiday",
    "2025-05-06": "Buddha's Birthday",
    "2025-10-05": "Chuseok Eve",
    "2025-10-06": "Chuseok",
    "2025-10-07": "Chuseok Holiday",
    "2025-10-08": "Substitute Holiday",
    # 2026
    "2026-02-16": "Lunar New Year's Eve",
    "2026-02-17": "Lunar New Year",
    "2026-02-18": "Lunar New Year Holiday",
    "2026-05-25": "Buddha's Birthday",
    "2026-09-24": "Chuseok Eve",
    "2026-09-25": "Chuseok",
    "2026-09-26": "Chuseok Holiday",
    # 2027
    "2027-02-05": "Lunar New Year's Eve",
    "2027-02-06": "Lunar New Year",
    "2027-02-07": "Lunar New Year Holiday",
    "2027-05-13": "Buddha's Birthday",
    "2027-10-14": "Chuseok Eve",
    "2027-10-15": "Chuseok",
    "2027-10-16": "Chuseok Holiday",
}


class HolidayLookup:
    """Read-only holiday table: dated entries take precedence over fixed ones."""

    def __init__(
        self,
        fixed: Optional[Mapping[str, str]] = None,
        dated: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._fixed = dict(FIXED_HOLIDAYS if fixed is None else fixed)
        self._dated = dict(DATED_HOLIDAYS if dated is None else dated)

    @property
    def covered_years(self) -> list[int]:
        return sorted({int(key[:4]) for key in self._dated})

    def lookup(self, date: pendulum.Date) -> Optional[str]:
        full_key = date_to_key(date)
        dated = self._dated.get(full_key)
        if dated is not None:
            return dated
        return self._fixed.get(full_key[5:])

    def is_holiday(self, date: pendulum.Date) -> bool:
        return self.lookup(date) is not None
