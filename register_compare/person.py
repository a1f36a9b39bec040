"""
person.py - Person modeling for register page comparison.

This module provides the Person class used by entries and pages. It supports:
    - Name and life events (birth, death, christening, burial)
    - Family memberships and cross-reference strings
    - Event corroboration between two people
    - Filling missing event places from the page location

Module: register_compare.person
Last updated: 2026-10-18
"""

__all__ = ['Person', 'EVENT_TYPES']

import logging
from typing import Iterable, List, Optional

from .life_event import LifeEvent
from .name import PersonName

logger = logging.getLogger(__name__)

EVENT_TYPES = ('birth', 'death', 'christening', 'burial')


class Person:
    """
    Represents a person transcribed or extracted from a register page.

    Attributes:
        name (PersonName): Given name and surname.
        birth (LifeEvent): Birth event.
        death (LifeEvent): Death event.
        christening (LifeEvent): Christening event.
        burial (LifeEvent): Burial event.
        families (List[int]): Ids of the families the person belongs to (as parent or child).
        references (List[str]): Cross-reference strings (e.g. page/line references).
        source (str): Label of the entry the person was read from.
        uid (str): Parser-assigned alias, not used for matching.
    """
    __slots__ = ['name',
                 'birth', 'death', 'christening', 'burial',
                 'families', 'references',
                 'source', 'uid']

    def __init__(self, name: Optional[PersonName] = None,
                 birth: Optional[LifeEvent] = None, death: Optional[LifeEvent] = None,
                 christening: Optional[LifeEvent] = None, burial: Optional[LifeEvent] = None,
                 families: Optional[Iterable[int]] = None, references: Optional[Iterable[str]] = None,
                 source: str = '', uid: str = ''):
        """
        Initialize a Person instance. Missing events default to empty events.
        """
        self.name : PersonName = name if name is not None else PersonName()

        self.birth : LifeEvent = birth if birth is not None else LifeEvent(what='birth')
        self.death : LifeEvent = death if death is not None else LifeEvent(what='death')
        self.christening : LifeEvent = christening if christening is not None else LifeEvent(what='christening')
        self.burial : LifeEvent = burial if burial is not None else LifeEvent(what='burial')

        self.families : List[int] = list(families) if families else []
        self.references : List[str] = []
        for reference in references or []:
            self.add_reference(reference)

        self.source : str = source or ''
        self.uid : str = uid or ''

    def __str__(self) -> str:
        """
        Returns the name with birth and death, e.g. 'John Smith born Normal 01.03.1850 Boston'.
        """
        if self.is_empty():
            return '<Empty Person>'
        result = str(self.name) or '<Unknown Name>'
        if not self.birth.is_empty():
            result += f" born {self.birth}"
        if not self.death.is_empty():
            result += f" died {self.death}"
        return result

    def __repr__(self) -> str:
        return f"[ {self.uid} : {self.name} - {self.source} - families {self.families} ]"

    def is_empty(self) -> bool:
        return (self.name.is_empty()
                and all(self.get_event(event_type).is_empty() for event_type in EVENT_TYPES)
                and not self.families and not self.references and self.source == '')

    def is_valid(self) -> bool:
        return (self.name.is_valid()
                or any(self.get_event(event_type).is_valid() for event_type in EVENT_TYPES)
                or bool(self.families) or bool(self.references) or self.source != '')

    def get_event(self, event_type: str) -> LifeEvent:
        """
        Return the life event of the given type.

        Args:
            event_type (str): One of 'birth', 'death', 'christening', 'burial'.

        Raises:
            ValueError: If the event type is unknown.
        """
        if event_type not in EVENT_TYPES:
            raise ValueError(f"Unknown event type '{event_type}', expected one of {EVENT_TYPES}")
        return getattr(self, event_type)

    def is_deceased(self) -> bool:
        return self.death.is_valid()

    def life_summary(self) -> str:
        """
        Returns a one-line summary of the person's name and valid life events.
        """
        parts = [str(self.name) or '<Unknown Name>']
        for label, event in (('born', self.birth), ('christened', self.christening),
                             ('died', self.death), ('buried', self.burial)):
            if event.is_valid():
                parts.append(f"{label} {event}")
        return ', '.join(parts)

    def add_family(self, family_id: int) -> None:
        if family_id not in self.families:
            self.families.append(family_id)

    def remove_family(self, family_id: int) -> None:
        if family_id in self.families:
            self.families.remove(family_id)

    def add_reference(self, reference: str) -> None:
        """Add a cross-reference string; empty and duplicate references are ignored."""
        if not isinstance(reference, str):
            logger.warning(f"Ignoring non-string reference {reference!r} for {self.name}")
            return
        reference = reference.strip()
        if reference and reference not in self.references:
            self.references.append(reference)

    def remove_reference(self, reference: str) -> None:
        if reference in self.references:
            self.references.remove(reference)

    def event_match(self, other: "Person", event_types: Iterable[str] = EVENT_TYPES) -> bool:
        """
        Check if at least one event corroborates that two people are the same.

        An event corroborates when both sides have a valid date and neither
        its date nor its place differs. A shared place alone (typically the
        parish of the page) is not evidence.

        Args:
            other (Person): Person to compare with.
            event_types (Iterable[str]): Event types to consider.

        Returns:
            bool: True if any listed event matches.
        """
        if not isinstance(other, Person):
            return False
        for event_type in event_types:
            mine = self.get_event(event_type)
            theirs = other.get_event(event_type)
            if mine.date.is_valid() and theirs.date.is_valid() and not any(mine.differences(theirs)):
                return True
        return False

    def fill_events(self, place: str) -> None:
        """
        Fill the place of exactly dated events that have no place.

        Args:
            place (str): Place to use, typically the page location.
        """
        for event_type in EVENT_TYPES:
            self.get_event(event_type).fill_place(place)
