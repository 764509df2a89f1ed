"""First-Wednesday date resolution."""

from datetime import date, timedelta

# Days forward from the 1st to reach Wednesday, keyed by date.weekday() of the 1st
WEDNESDAY_OFFSETS = {
    0: 2,  # Monday
    1: 1,  # Tuesday
    2: 0,  # Wednesday
    3: 6,  # Thursday
    4: 5,  # Friday
    5: 4,  # Saturday
    6: 3,  # Sunday
}


def resolve_target_month(target_month: int | None, today: date) -> tuple[int, int]:
    """Pick the (year, month) to use for a requested month.

    Without a month, the month after ``today`` is used. A requested month
    earlier than the current one refers to next year's occurrence; the
    current month itself always stays in the current year.
    """
    if target_month is None:
        if today.month == 12:
            return today.year + 1, 1
        return today.year, today.month + 1

    if not 1 <= target_month <= 12:
        raise ValueError(f"Month must be between 1 and 12, got: {target_month}")

    if target_month < today.month:
        return today.year + 1, target_month
    return today.year, target_month


def first_wednesday(year: int, month: int) -> date:
    """Return the first Wednesday of the given month."""
    first_day = date(year, month, 1)
    return first_day + timedelta(days=WEDNESDAY_OFFSETS[first_day.weekday()])


def resolve(target_month: int | None, today: date) -> date:
    """Resolve the first Wednesday for the target month relative to today."""
    year, month = resolve_target_month(target_month, today)
    return first_wednesday(year, month)


def folder_name(value: date) -> str:
    """Format a date as a YYYYMMDD folder name."""
    return f"{value.year:04d}{value.month:02d}{value.day:02d}"
