"""
name.py - Person name modeling and name comparison.

Provides the PersonName class holding a given name and a surname, with the two
comparison predicates used when matching people across pages:
    - exact_match: case-insensitive equality of both parts
    - similar_match: phonetic (Soundex) or fuzzy (rapidfuzz ratio) agreement

Module: register_compare.name
Last updated: 2026-10-18
"""

__all__ = ['PersonName', 'NAME_VARIATION_THRESHOLD']

from typing import Optional

import jellyfish
from rapidfuzz import fuzz

NAME_VARIATION_THRESHOLD: int = 80


def _normalise(part: str) -> str:
    return ' '.join(part.split()).casefold()


class PersonName:
    """
    Represents a person's name as given name(s) plus surname.

    Attributes:
        given (str): Given name(s), '' if unknown.
        surname (str): Surname, '' if unknown.
    """
    __slots__ = ['given', 'surname']

    def __init__(self, given: Optional[str] = None, surname: Optional[str] = None):
        self.given: str = given.strip() if given else ''
        self.surname: str = surname.strip() if surname else ''

    def __str__(self) -> str:
        return ' '.join(part for part in (self.given, self.surname) if part)

    def __repr__(self) -> str:
        return f"PersonName(given={self.given!r}, surname={self.surname!r})"

    def is_empty(self) -> bool:
        return self.given == '' and self.surname == ''

    def is_valid(self) -> bool:
        return not self.is_empty()

    def genealogical_format(self) -> str:
        """
        Returns the name as 'Surname, Given' (or whichever part is known).
        """
        if self.given and self.surname:
            return f"{self.surname}, {self.given}"
        return str(self)

    def initials(self) -> str:
        return ''.join(part[0].upper() for part in (self.given, self.surname) if part)

    def exact_match(self, other: "PersonName") -> bool:
        """
        Check if both name parts are equal, ignoring case and repeated whitespace.

        Args:
            other (PersonName): Name to compare with.

        Returns:
            bool: True if the names match exactly. Empty names never match.
        """
        if not isinstance(other, PersonName) or self.is_empty() or other.is_empty():
            return False
        return (_normalise(self.given) == _normalise(other.given)
                and _normalise(self.surname) == _normalise(other.surname))

    def similar_match(self, other: "PersonName", threshold: int = NAME_VARIATION_THRESHOLD) -> bool:
        """
        Check if two names are plausibly the same name, allowing for spelling and transcription variants.

        The names are similar if they match exactly, if the Soundex codes of both the given
        name and the surname agree, or if both parts are close spelling variations
        (rapidfuzz ratio of at least `threshold`). An empty part only agrees with an
        empty part.

        Args:
            other (PersonName): Name to compare with.
            threshold (int): Minimum rapidfuzz ratio (0-100) for a name variation.

        Returns:
            bool: True if the names are similar. Empty names never match.
        """
        if not isinstance(other, PersonName) or self.is_empty() or other.is_empty():
            return False
        if self.exact_match(other):
            return True
        if (self._soundex_agrees(self.given, other.given)
                and self._soundex_agrees(self.surname, other.surname)):
            return True
        return (self._is_variation(self.given, other.given, threshold)
                and self._is_variation(self.surname, other.surname, threshold))

    @staticmethod
    def _soundex_agrees(first: str, second: str) -> bool:
        if not first or not second:
            return not first and not second
        return jellyfish.soundex(first) == jellyfish.soundex(second)

    @staticmethod
    def _is_variation(first: str, second: str, threshold: int) -> bool:
        if not first or not second:
            return not first and not second
        return fuzz.ratio(_normalise(first), _normalise(second)) >= threshold
