"""
Date helpers: driver ages, session times, race status and countdowns
"""

import logging
from datetime import date, datetime, timezone
from typing import Dict, Iterable, List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from f1stats.utils.countries import COUNTRY_TIMEZONES

logger = logging.getLogger(__name__)

RACE_STATUSES = ("all", "completed", "upcoming")


def parse_birthday(birthday: Optional[str]) -> Optional[date]:
    """
    Parse the birthday formats the F1 API hands out:
    "01/09/1994", "01-09-1994" (day first) and "1994-09-01" (ISO).
    Returns None if the value can't be read.
    """
    if not birthday:
        return None

    value = birthday.strip()
    try:
        if "/" in value:
            day, month, year = value.split("/")
            return date(int(year), int(month), int(day))
        if "-" in value:
            parts = value.split("-")
            if len(parts[0]) == 4:
                return datetime.fromisoformat(value).date()
            day, month, year = parts
            return date(int(year), int(month), int(day))
        return datetime.fromisoformat(value).date()
    except ValueError:
        logger.warning(f"Invalid date format: {birthday}")
        return None


def calculate_age(birthday: Optional[str], today: Optional[date] = None) -> Optional[int]:
    """Age in whole years, or None when the birthday is missing/invalid"""
    born = parse_birthday(birthday)
    if born is None:
        return None

    today = today or date.today()
    age = today.year - born.year
    # birthday hasn't happened yet this year
    if (today.month, today.day) < (born.month, born.day):
        age -= 1
    return age


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def session_datetime(date_str: Optional[str], time_str: Optional[str]) -> Optional[datetime]:
    """Combine an API date ("2025-03-16") and time ("04:00:00Z") into an aware UTC datetime"""
    if not date_str or not time_str:
        return None
    stamp = f"{date_str}T{time_str}"
    if stamp.endswith("Z"):
        stamp = stamp[:-1] + "+00:00"
    try:
        moment = datetime.fromisoformat(stamp)
    except ValueError:
        return None
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment


def is_session_passed(date_str: Optional[str], time_str: Optional[str], now: Optional[datetime] = None) -> bool:
    moment = session_datetime(date_str, time_str)
    if moment is None:
        return False
    return moment < (now or utc_now())


def is_race_completed(race, now: Optional[datetime] = None) -> bool:
    """A race without a usable schedule is never completed"""
    return is_session_passed(race.race_date, race.race_time, now)


def filter_races(races: Iterable, status: str = "all", now: Optional[datetime] = None) -> List:
    now = now or utc_now()
    races = list(races)
    if status == "completed":
        return [r for r in races if is_race_completed(r, now)]
    if status == "upcoming":
        return [r for r in races if not is_race_completed(r, now)]
    return races


def count_races_by_status(races: Iterable, now: Optional[datetime] = None) -> Dict[str, int]:
    now = now or utc_now()
    races = list(races)
    completed = sum(1 for r in races if is_race_completed(r, now))
    return {
        "total": len(races),
        "completed": completed,
        "upcoming": len(races) - completed,
    }


def format_circuit_time(date_str: Optional[str], time_str: Optional[str], country: Optional[str]) -> str:
    """Session start in the circuit's local time, e.g. "Sun, Mar 16, 03:00 PM" """
    moment = session_datetime(date_str, time_str)
    if moment is None:
        return "TBD"
    try:
        local = moment.astimezone(ZoneInfo(COUNTRY_TIMEZONES.get(country or "", "UTC")))
    except ZoneInfoNotFoundError:
        local = moment
    return f"{local:%a, %b} {local.day}, {local:%I:%M %p}"


def time_until(target: Optional[datetime], now: Optional[datetime] = None) -> Dict[str, int]:
    """Countdown split into days/hours/minutes/seconds, all zero once passed"""
    if target is None:
        return {"days": 0, "hours": 0, "minutes": 0, "seconds": 0}
    remaining = int((target - (now or utc_now())).total_seconds())
    if remaining <= 0:
        return {"days": 0, "hours": 0, "minutes": 0, "seconds": 0}
    days, remaining = divmod(remaining, 86400)
    hours, remaining = divmod(remaining, 3600)
    minutes, seconds = divmod(remaining, 60)
    return {"days": days, "hours": hours, "minutes": minutes, "seconds": seconds}
