"""Date buckets used by the task filters (date-only, week starts on Sunday)."""

from datetime import date, timedelta
from typing import Optional, Tuple


def _today(today: Optional[date]) -> date:
    return today if today is not None else date.today()


def week_window(today: Optional[date] = None) -> Tuple[date, date]:
    """Sunday..Saturday window containing ``today``."""
    today = _today(today)
    # weekday(): lundi = 0, on veut dimanche = 0
    days_since_sunday = (today.weekday() + 1) % 7
    week_start = today - timedelta(days=days_since_sunday)
    week_end = week_start + timedelta(days=6)
    return week_start, week_end


def is_overdue(due_date: date, today: Optional[date] = None) -> bool:
    return due_date < _today(today)


def is_today(due_date: date, today: Optional[date] = None) -> bool:
    return due_date == _today(today)


def is_this_week(due_date: date, today: Optional[date] = None) -> bool:
    week_start, week_end = week_window(today)
    return week_start <= due_date <= week_end
