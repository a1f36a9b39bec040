"""
page.py - Page data model: all entries read from one source for one register page.

The Page keeps its entries plus flat lookups of every person and family on the
page, for reporting. It supports:
    - Adding whole entries, remapping ids that collide with ids already on the page
    - Adding people and families one at a time, as parsers do
    - Deep-copy accessors so callers can never modify the page by accident
    - Filling event places from the page location and missing surnames

Module: register_compare.page
Last updated: 2026-10-18
"""

__all__ = ['Page']

import copy
import logging
from typing import Dict, List, Optional

from .entry import Entry
from .family import Family
from .person import Person

logger = logging.getLogger(__name__)


def _next_free_id(start: int, used) -> int:
    new_id = start
    while new_id in used:
        new_id += 1
    return new_id


def _free_uid(person_id: int, used) -> str:
    """Generated alias for a person without a uid, avoiding the aliases in used."""
    uid = f"person_{person_id}"
    suffix = 1
    while uid in used:
        uid = f"person_{person_id}_{suffix}"
        suffix += 1
    return uid


class Page:
    """
    A named collection of entries.

    Attributes:
        location (str): Location label of the page (e.g. parish), '' if unknown.
        entries (Dict[str, Entry]): entry id -> Entry.
        people (Dict[int, Person]): Flat person id -> Person lookup across entries.
        families (Dict[int, Family]): Flat family id -> Family lookup across entries.
    """
    __slots__ = ['location', 'entries', 'people', 'families']

    def __init__(self, location: str = ''):
        self.location: str = location or ''
        self.entries: Dict[str, Entry] = {}
        self.people: Dict[int, Person] = {}
        self.families: Dict[int, Family] = {}

    def __str__(self) -> str:
        if self.is_empty():
            return '<Empty Page>'
        return f"<Page: {self.entry_count()} entries, {self.people_count()} people, {self.family_count()} families>"

    def __repr__(self) -> str:
        return f"Page(location={self.location!r}, entries={sorted(self.entries)})"

    def add_entry(self, entry: Entry) -> bool:
        """
        Add a copy of an entry to the page.

        Person and family ids already used on the page are remapped to the next
        free id; family members and family memberships are rewritten to match.
        An entry with the same id replaces the existing one.

        Args:
            entry (Entry): The entry to add.

        Returns:
            bool: False if the entry has no id.

        Raises:
            TypeError: If entry is not an Entry.
        """
        if not isinstance(entry, Entry):
            raise TypeError(f"Expected Entry, got {type(entry).__name__}")
        if not entry.id:
            logger.warning("Ignoring entry without an id")
            return False
        if entry.id in self.entries:
            self.remove_entry(entry.id)

        person_map: Dict[int, int] = {}
        for person_id in sorted(entry.people):
            person_map[person_id] = _next_free_id(person_id, self.people.keys() | person_map.values())
        family_map: Dict[int, int] = {}
        for family_id in sorted(entry.families):
            family_map[family_id] = _next_free_id(family_id, self.families.keys() | family_map.values())

        remapped = Entry(entry.id)
        reserved = set(entry.uids) | {p.uid for p in entry.people.values() if p.uid}
        for old_id, new_id in person_map.items():
            person = copy.deepcopy(entry.people[old_id])
            person.families = [family_map.get(fid, fid) for fid in person.families]
            uid = person.uid or _free_uid(new_id, reserved | remapped.uids.keys())
            if not remapped.add_person(new_id, person, uid):
                logger.warning(f"Entry {entry.id}: person {old_id} not added to page")
                continue
            self.people[new_id] = copy.deepcopy(remapped.people[new_id])
        for old_id, new_id in family_map.items():
            family = copy.deepcopy(entry.families[old_id])
            family.remap(person_map)
            remapped.add_family(new_id, family)
            self.families[new_id] = copy.deepcopy(family)

        if any(old != new for old, new in person_map.items()) or any(old != new for old, new in family_map.items()):
            logger.debug(f"Entry {entry.id}: remapped colliding ids on page")
        self.entries[entry.id] = remapped
        return True

    def add_person(self, person: Person, person_id: int) -> bool:
        """
        Add a person to the page and to the entry named by person.source.

        Args:
            person (Person): The person to add.
            person_id (int): Page-unique person id.

        Returns:
            bool: False if the person has no source entry label, or the entry
                already holds its uid.

        Raises:
            TypeError: If person is not a Person or person_id is not an integer.
            ValueError: If person_id is already used on the page.
        """
        if not isinstance(person, Person):
            raise TypeError(f"Expected Person, got {type(person).__name__}")
        if not isinstance(person_id, int) or isinstance(person_id, bool):
            raise TypeError(f"Person id must be an integer, got {type(person_id).__name__}")
        if person_id in self.people:
            raise ValueError(f"Person id {person_id} already exists on page")
        if not person.source:
            logger.warning(f"Person {person_id} ({person.name}) has no source entry, not added")
            return False

        entry = self.entries.setdefault(person.source, Entry(person.source))
        stored = copy.deepcopy(person)
        if not stored.uid:
            stored.uid = _free_uid(person_id, entry.uids)
        if not entry.add_person(person_id, stored):
            return False
        self.people[person_id] = stored
        return True

    def add_family(self, family: Family, family_id: int, entry_id: Optional[str] = None) -> bool:
        """
        Add a family to the page, and to an entry if entry_id is given.

        Returns:
            bool: False if the entry already holds the family id.

        Raises:
            TypeError: If family is not a Family or family_id is not an integer.
            ValueError: If family_id is already used on the page.
        """
        if not isinstance(family, Family):
            raise TypeError(f"Expected Family, got {type(family).__name__}")
        if not isinstance(family_id, int) or isinstance(family_id, bool):
            raise TypeError(f"Family id must be an integer, got {type(family_id).__name__}")
        if family_id in self.families:
            raise ValueError(f"Family id {family_id} already exists on page")

        if entry_id is not None:
            entry = self.entries.setdefault(entry_id, Entry(entry_id))
            if not entry.add_family(family_id, family):
                return False
            for person_id in family.members():
                if person_id in self.people:
                    self.people[person_id].add_family(family_id)
        self.families[family_id] = copy.deepcopy(family)
        return True

    def entry_ids(self) -> List[str]:
        return sorted(self.entries)

    def get_entries(self) -> Dict[str, Entry]:
        return copy.deepcopy(self.entries)

    def get_entry(self, entry_id: str) -> Optional[Entry]:
        entry = self.entries.get(entry_id)
        return entry.clone() if entry is not None else None

    def get_people(self) -> Dict[int, Person]:
        return copy.deepcopy(self.people)

    def get_person(self, person_id: int) -> Optional[Person]:
        person = self.people.get(person_id)
        return copy.deepcopy(person) if person is not None else None

    def get_families(self) -> Dict[int, Family]:
        return copy.deepcopy(self.families)

    def get_family(self, family_id: int) -> Optional[Family]:
        family = self.families.get(family_id)
        return copy.deepcopy(family) if family is not None else None

    def is_empty(self) -> bool:
        return not self.entries and not self.people and not self.families

    def entry_count(self) -> int:
        return len(self.entries)

    def people_count(self) -> int:
        return len(self.people)

    def family_count(self) -> int:
        return len(self.families)

    def remove_entry(self, entry_id: str) -> bool:
        """
        Remove an entry together with its people and families.

        Returns:
            bool: False if the entry does not exist.
        """
        entry = self.entries.pop(entry_id, None)
        if entry is None:
            return False
        for person_id in entry.people:
            self.people.pop(person_id, None)
        for family_id in entry.families:
            self.families.pop(family_id, None)
        return True

    def clone(self) -> "Page":
        return copy.deepcopy(self)

    def fill_events(self) -> None:
        """
        Fill empty places of exactly dated events with the page location.
        """
        if not self.location:
            return
        for person in self.people.values():
            person.fill_events(self.location)
        for family in self.families.values():
            family.fill_marriage(self.location)
        for entry in self.entries.values():
            entry.fill_events(self.location)

    def fill_surname(self) -> int:
        """
        Fill missing surnames in every entry and mirror them in the flat lookup.

        Returns:
            int: Number of people updated.
        """
        count = 0
        for entry in self.entries.values():
            for person_id, surname in entry.fill_surname().items():
                if person_id in self.people:
                    self.people[person_id].name.surname = surname
                count += 1
        return count
