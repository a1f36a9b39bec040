"""
life_event.py - Life event modeling for register comparison.

This module provides the LifeEvent class: a date and place pair used for
births, deaths, christenings, burials and marriages. It supports:
    - Emptiness and validity checks used by the comparison facets
    - Filling in a missing place from the page location
    - Reporting whether dates and/or places of two events differ

Module: register_compare.life_event
Last updated: 2026-10-18
"""

from typing import Optional, Tuple, Union

from ged4py.date import DateValue

from .register_date import RegisterDate


class LifeEvent:
    """
    Represents a life event (birth, death, marriage, etc.) for a person or family.

    Attributes:
        date (RegisterDate): The date of the event (may be empty).
        place (str): The place where the event occurred ('' if unknown).
        what (str): The type of event (e.g., 'birth', 'marriage').
    """
    __slots__ = [
        'date',
        'place',
        'what'
    ]

    def __init__(self, date: Union[RegisterDate, DateValue, str, None] = None, place: Optional[str] = None, what: str = ''):
        """
        Initialize a LifeEvent instance.

        Args:
            date: Date of the event (parsed with RegisterDate).
            place (Optional[str]): Place of the event.
            what (str): Type of event (e.g., 'birth', 'death').
        """
        self.date: RegisterDate = RegisterDate(date)
        self.place: str = place.strip() if place else ''
        self.what: str = what

    def __repr__(self) -> str:
        """
        Returns a string representation of the LifeEvent for debugging.
        """
        if self.what:
            return f"[ {str(self.date)} : {self.place} is {self.what}]"
        return f'[ {str(self.date)} : {self.place} ]'

    def __str__(self) -> str:
        """
        Returns 'date place', the date alone, or '<Empty>'.
        """
        if self.is_empty():
            return '<Empty>'
        if not self.place:
            return str(self.date)
        if self.date.is_empty():
            return self.place
        return f"{self.date} {self.place}"

    def is_empty(self) -> bool:
        """Returns True if neither date nor place is set."""
        return self.date.is_empty() and self.place == ''

    def is_valid(self) -> bool:
        """Returns True if the event has a valid date or a place."""
        return self.date.is_valid() or self.place != ''

    def has_exact_date(self) -> bool:
        return self.date.is_exact()

    def fill_place(self, place: str) -> bool:
        """
        Set the place of a valid, exactly dated event that has no place yet.

        Args:
            place (str): Place to use, typically the page location.

        Returns:
            bool: True if the place was filled in.
        """
        if not place or not isinstance(place, str):
            return False
        if self.is_valid() and self.has_exact_date() and self.place == '':
            self.place = place.strip()
            return True
        return False

    def differences(self, other: "LifeEvent") -> Tuple[bool, bool]:
        """
        Compare this event with another one.

        Places are compared case-insensitively after trimming.

        Returns:
            Tuple[bool, bool]: (dates_differ, places_differ)
        """
        dates_differ = self.date.differs_from(other.date)
        places_differ = self.place.casefold() != other.place.casefold()
        return dates_differ, places_differ
