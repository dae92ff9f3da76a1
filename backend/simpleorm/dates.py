"""Conversion between the canonical (storage) and display forms of temporal columns.

Canonical: ``YYYY-MM-DD[ HH:MM:SS]``. Display: ``DD/MM/YYYY[ HH:MM:SS]``.
"""
from datetime import date, datetime

STORAGE_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
STORAGE_DATE_FORMAT = "%Y-%m-%d"
DISPLAY_DATETIME_FORMAT = "%d/%m/%Y %H:%M:%S"
DISPLAY_DATE_FORMAT = "%d/%m/%Y"

_TO_DISPLAY = [
    (STORAGE_DATETIME_FORMAT, DISPLAY_DATETIME_FORMAT),
    (STORAGE_DATE_FORMAT, DISPLAY_DATE_FORMAT),
]
_TO_STORAGE = [
    (DISPLAY_DATETIME_FORMAT, STORAGE_DATETIME_FORMAT),
    (DISPLAY_DATE_FORMAT, STORAGE_DATE_FORMAT),
]


def _convert(value, formats):
    if value is None:
        return None
    (_, datetime_target), (_, date_target) = formats
    if isinstance(value, datetime):
        return value.strftime(datetime_target)
    if isinstance(value, date):
        return value.strftime(date_target)
    for source, target in formats:
        try:
            return datetime.strptime(value, source).strftime(target)
        except ValueError:
            continue
    raise ValueError(f"Unrecognised date format: {value!r}")


def to_display(value):
    return _convert(value, _TO_DISPLAY)


def to_storage(value):
    return _convert(value, _TO_STORAGE)


def storage_value(value):
    """Canonical text for a value already held in storage form (drivers may hand back datetimes)."""
    if isinstance(value, (date, datetime)):
        return _convert(value, _TO_STORAGE)
    return value
