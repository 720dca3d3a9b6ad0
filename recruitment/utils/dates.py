from datetime import date, datetime, time

from recruitment.errors import InvalidDateError


def _parse_iso(value):
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError as e:
        raise InvalidDateError(f"Invalid date: {value}") from e


def to_date(value):
    """Accept a ``date``, a ``datetime`` or an ISO string and return a ``date``."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return _parse_iso(value).date()


def to_datetime(value):
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    return _parse_iso(value)


def date_range(date_from=None, date_to=None):
    """
    Turn optional query-string bounds into datetimes.

    A bare date as the upper bound covers that whole day. Unparseable bounds
    raise ``InvalidDateError`` (400).
    """
    start = to_datetime(date_from)
    end = to_datetime(date_to)
    if end is not None and isinstance(date_to, str) and len(date_to) == 10:
        end = datetime.combine(end.date(), time.max)
    return start, end
