"""
register_date.py - Strict register date grammar for comparison work.

Provides the RegisterDate class used by life events. Register transcriptions
carry ISO dates with optional GEDCOM-style qualifiers:
    - YYYY-MM-DD
    - ABT / BEF / AFT YYYY-MM-DD
    - BET YYYY-MM-DD AND YYYY-MM-DD

Dates can also be converted to and from ged4py DateValue objects.

Module: register_compare.register_date
Last updated: 2026-10-18
"""

__all__ = ['DateFormatError', 'RegisterDate']

import calendar
import logging
import re
from functools import total_ordering
from typing import Optional, Tuple, Union

from ged4py.calendar import GregorianDate
from ged4py.date import DateValue

logger = logging.getLogger(__name__)

ISO_DATE_RE = re.compile(r'^(\d{4})-(\d{2})-(\d{2})$')
QUALIFIERS = ('ABT', 'BEF', 'AFT')
QUALIFIER_LABELS = {'': 'Normal', 'ABT': 'About', 'BEF': 'Before', 'AFT': 'After'}
DATE_VALUE_QUALIFIERS = {'SIMPLE': '', 'ABOUT': 'ABT', 'BEFORE': 'BEF', 'AFTER': 'AFT'}


class DateFormatError(ValueError):
    """Raised when a date string does not follow the register date grammar."""


@total_ordering
class RegisterDate:
    """
    A register date: a single day, optionally qualified, or a BET..AND range.

    Strings passed to the constructor are parsed strictly; if parsing fails the
    raw text is kept (see is_parsed) so comparison can report a difference
    instead of failing. Use RegisterDate.parse() to get the exception.

    Attributes:
        original (Optional[str]): The original text, if built from a string.
        year (Optional[int]): Year of a single date.
        month (Optional[int]): Month number (1-12) of a single date.
        day (Optional[int]): Day in month of a single date.
        qualifier (str): '', 'ABT', 'BEF' or 'AFT'.
        start (Optional[RegisterDate]): First bound of a range.
        end (Optional[RegisterDate]): Second bound of a range.
    """
    min_year: int = 1400
    max_year: int = 2000

    __slots__ = [
        'original',
        'year',
        'month',
        'day',
        'qualifier',
        'start',
        'end'
    ]

    def __init__(self, date: Union[str, DateValue, "RegisterDate", None] = None):
        """
        Initialize a RegisterDate.

        Args:
            date: ISO register string, ged4py DateValue, another RegisterDate or None.
        """
        self.original: Optional[str] = None
        self.year: Optional[int] = None
        self.month: Optional[int] = None
        self.day: Optional[int] = None
        self.qualifier: str = ''
        self.start: Optional[RegisterDate] = None
        self.end: Optional[RegisterDate] = None

        if date is None:
            return
        if isinstance(date, RegisterDate):
            self._copy_from(date)
        elif isinstance(date, (DateValue, str)):
            text = str(date).strip()
            if not text:
                return
            try:
                if isinstance(date, DateValue):
                    self._copy_from(RegisterDate.from_date_value(date))
                else:
                    self._copy_from(RegisterDate.parse(text))
            except DateFormatError as e:
                logger.warning(f"Keeping unparsed register date '{text}': {e}")
                self.original = text
        else:
            raise TypeError(f"Unsupported date type: {type(date)}")

    def _copy_from(self, other: "RegisterDate") -> None:
        self.original = other.original
        self.year = other.year
        self.month = other.month
        self.day = other.day
        self.qualifier = other.qualifier
        self.start = RegisterDate(other.start) if other.start else None
        self.end = RegisterDate(other.end) if other.end else None

    @classmethod
    def parse(cls, text: str) -> "RegisterDate":
        """
        Parse a register date string strictly.

        Args:
            text (str): Date text, e.g. '1850-03-01', 'abt 1850-03-01',
                'BET 1850-01-01 AND 1850-12-31'.

        Returns:
            RegisterDate: The parsed date.

        Raises:
            DateFormatError: If the text does not follow the grammar or a value is out of range.
        """
        if not isinstance(text, str) or not text.strip():
            raise DateFormatError('Date string is required and must be a non-empty string')

        original = text.strip()
        normalized = original.upper()
        result = cls()
        result.original = original

        prefix = normalized[:4]
        if prefix in (q + ' ' for q in QUALIFIERS):
            result.qualifier = prefix.strip()
            result._set_components(normalized[4:].strip())
        elif prefix == 'BET ':
            content = normalized[4:].strip()
            if ' AND ' not in content:
                raise DateFormatError('Range format must be "BET YYYY-MM-DD AND YYYY-MM-DD"')
            first, second = content.split(' AND ', 1)
            result.start = cls.parse(first.strip())
            result.end = cls.parse(second.strip())
            if result.start.is_range or result.end.is_range:
                raise DateFormatError('Range bounds must be single dates')
        else:
            result._set_components(normalized)
        return result

    def _set_components(self, text: str) -> None:
        self.year, self.month, self.day = self._parse_iso(text)

    @classmethod
    def _parse_iso(cls, text: str) -> Tuple[int, int, int]:
        """
        Validate and split a bare YYYY-MM-DD string.

        Returns:
            Tuple[int, int, int]: (year, month, day)
        """
        match = ISO_DATE_RE.match(text)
        if not match:
            raise DateFormatError(f"Date must be in ISO 8601 format (YYYY-MM-DD), got '{text}'")
        year, month, day = (int(part) for part in match.groups())
        if year < cls.min_year or year > cls.max_year:
            raise DateFormatError(f"Year must be between {cls.min_year} and {cls.max_year}, got {year}")
        if month < 1 or month > 12:
            raise DateFormatError(f"Month must be between 1 and 12, got {month}")
        days_in_month = calendar.monthrange(year, month)[1]
        if day < 1 or day > days_in_month:
            raise DateFormatError(f"Day must be between 1 and {days_in_month} for month {month}, got {day}")
        return year, month, day

    @classmethod
    def from_date_value(cls, value: DateValue) -> "RegisterDate":
        """
        Convert a ged4py DateValue into a RegisterDate.

        Only simple, qualified (ABT/BEF/AFT) and BET..AND values with a full
        day, month and year are representable.

        Raises:
            DateFormatError: If the value cannot be represented.
        """
        kind = getattr(value, 'kind', None)
        kind_name = kind.name if kind is not None else None
        result = cls()
        result.original = str(value)
        if kind_name in DATE_VALUE_QUALIFIERS:
            result.qualifier = DATE_VALUE_QUALIFIERS[kind_name]
            result.year, result.month, result.day = cls._from_calendar_date(value.date)
        elif kind_name == 'RANGE':
            result.start = cls()
            result.start.year, result.start.month, result.start.day = cls._from_calendar_date(value.date1)
            result.end = cls()
            result.end.year, result.end.month, result.end.day = cls._from_calendar_date(value.date2)
        else:
            raise DateFormatError(f"Unsupported GEDCOM date value '{value}' ({kind_name})")
        return result

    @classmethod
    def _from_calendar_date(cls, date) -> Tuple[int, int, int]:
        if not isinstance(date, GregorianDate):
            raise DateFormatError(f"Only Gregorian dates are supported, got '{date}'")
        if date.day is None or date.month_num is None:
            raise DateFormatError(f"Date '{date}' is missing a day or month")
        return cls._parse_iso(f"{date.year:04d}-{date.month_num:02d}-{date.day:02d}")

    def to_date_value(self) -> Optional[DateValue]:
        """
        Returns the equivalent ged4py DateValue, or None for empty or unparsed dates.
        """
        if not self.is_parsed or self.is_empty():
            return None
        return DateValue.parse(self.to_gedcom())

    @property
    def is_range(self) -> bool:
        return self.start is not None and self.end is not None

    @property
    def is_about(self) -> bool:
        return self.qualifier == 'ABT'

    @property
    def is_before(self) -> bool:
        return self.qualifier == 'BEF'

    @property
    def is_after(self) -> bool:
        return self.qualifier == 'AFT'

    @property
    def is_parsed(self) -> bool:
        """
        False when the date was built from text that failed the grammar.
        """
        return self.original is None or self.year is not None or self.is_range

    def is_empty(self) -> bool:
        """
        Returns True if no date information is present at all.
        """
        return self.original is None and self.year is None and not self.is_range

    def is_valid(self) -> bool:
        """
        Returns True if the date has at least a year (range start for ranges).
        """
        if self.is_range:
            return self.start.is_valid()
        return self.year is not None and self.year > 0

    def is_exact(self) -> bool:
        """
        Returns True for a single, unqualified date with day, month and year.
        """
        return (self.year is not None and self.month is not None and self.day is not None
                and not self.is_range and self.qualifier == '')

    def to_gedcom(self) -> str:
        """
        Format as a GEDCOM date string, e.g. 'ABT 1 MAR 1850'.
        """
        if self.is_range:
            return f"BET {self.start.to_gedcom()} AND {self.end.to_gedcom()}"
        if self.year is None:
            return ''
        months = GregorianDate.months()
        parts = [self.qualifier] if self.qualifier else []
        if self.day and self.month:
            parts.append(f"{self.day} {months[self.month - 1]} {self.year}")
        elif self.month:
            parts.append(f"{months[self.month - 1]} {self.year}")
        else:
            parts.append(str(self.year))
        return ' '.join(parts)

    def to_iso(self) -> str:
        """
        Format as YYYY-MM-DD; empty for ranges and dates without a year.
        """
        if self.is_range or not self.is_valid():
            return ''
        return f"{self.year:04d}-{self.month or 1:02d}-{self.day or 1:02d}"

    @staticmethod
    def _dotted(date: "RegisterDate") -> str:
        day = f"{date.day:02d}" if date.day is not None else '00'
        month = f"{date.month:02d}" if date.month is not None else '00'
        year = f"{date.year:04d}" if date.year is not None else '0000'
        return f"{day}.{month}.{year}"

    def compare(self, other: "RegisterDate") -> int:
        """
        Compare chronologically by year, month and day.

        Ranges compare by their start date. Missing month or day counts as 1.

        Returns:
            int: -1 if earlier, 1 if later, 0 if equal or if either date is invalid.
        """
        if not self.is_valid() or not other.is_valid():
            return 0
        mine = self.start if self.is_range else self
        theirs = other.start if other.is_range else other
        key_mine = (mine.year, mine.month or 1, mine.day or 1)
        key_theirs = (theirs.year, theirs.month or 1, theirs.day or 1)
        if key_mine == key_theirs:
            return 0
        return -1 if key_mine < key_theirs else 1

    def _key(self) -> tuple:
        if self.is_range:
            return ('BET', self.start._key(), self.end._key())
        return (self.qualifier, self.year, self.month, self.day)

    def differs_from(self, other: "RegisterDate") -> bool:
        """
        Returns True unless both dates are empty or both parse to the same date.

        Unparsed text always counts as a difference.
        """
        if self.is_empty() and other.is_empty():
            return False
        if not self.is_parsed or not other.is_parsed:
            return True
        return self._key() != other._key()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RegisterDate):
            return NotImplemented
        if not self.is_parsed or not other.is_parsed:
            return self.original == other.original
        return self._key() == other._key()

    def __lt__(self, other: "RegisterDate") -> bool:
        if not isinstance(other, RegisterDate):
            return NotImplemented
        return self.compare(other) < 0

    def __hash__(self) -> int:
        return hash(self._key()) if self.is_parsed else hash(self.original)

    def __str__(self) -> str:
        if self.is_empty():
            return '<Empty>'
        if not self.is_parsed:
            return self.original
        if self.is_range:
            return f"Between {self._dotted(self.start)} and {self._dotted(self.end)}"
        return f"{QUALIFIER_LABELS[self.qualifier]} {self._dotted(self)}"

    def __repr__(self) -> str:
        return f"RegisterDate({self.to_gedcom() or self.original!r})"
