"""
entry.py - Entry data model: the people and families of one register block.

An Entry is a bounded family forest. It supports:
    - Adding people (with an optional parser uid alias) and families
    - Resolving uids to person ids
    - Relationship codes for its people
    - Filling missing surnames and event places before comparison

Module: register_compare.entry
Last updated: 2026-10-18
"""

import copy
import logging
from typing import Dict, Optional

from .family import Family
from .person import Person
from .relationship import relationship

logger = logging.getLogger(__name__)


def _check_id(value, what: str) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{what} must be an integer, got {type(value).__name__}")


class Entry:
    """
    People and families of one logical register block.

    Attributes:
        id (str): Entry id, shared by both pages being compared.
        people (Dict[int, Person]): person id -> Person.
        families (Dict[int, Family]): family id -> Family.
        uids (Dict[str, int]): parser uid -> person id.
    """
    __slots__ = ['id', 'people', 'families', 'uids']

    def __init__(self, entry_id: str):
        if not isinstance(entry_id, str):
            raise TypeError(f"Entry id must be a string, got {type(entry_id).__name__}")
        self.id: str = entry_id
        self.people: Dict[int, Person] = {}
        self.families: Dict[int, Family] = {}
        self.uids: Dict[str, int] = {}

    def __str__(self) -> str:
        if self.is_empty():
            return f"<Empty Entry: {self.id}>"
        return f"<Entry: {self.id} - {len(self.people)} people, {len(self.families)} families>"

    def __repr__(self) -> str:
        return f"Entry(id={self.id!r}, people={sorted(self.people)}, families={sorted(self.families)})"

    def add_person(self, person_id: int, person: Person, uid: str = '') -> bool:
        """
        Add a copy of a person to the entry.

        Args:
            person_id (int): Unique person id within the entry.
            person (Person): The person to add.
            uid (str): Optional parser alias; defaults to person.uid.

        Returns:
            bool: False if the person id or uid is already used.

        Raises:
            TypeError: If person_id is not an integer or person is not a Person.
        """
        _check_id(person_id, "Person id")
        if not isinstance(person, Person):
            raise TypeError(f"Expected Person, got {type(person).__name__}")
        uid = uid or person.uid
        if person_id in self.people:
            logger.warning(f"Entry {self.id}: person id {person_id} already exists")
            return False
        if uid and uid in self.uids:
            logger.warning(f"Entry {self.id}: uid '{uid}' already exists")
            return False

        stored = copy.deepcopy(person)
        if uid:
            stored.uid = uid
            self.uids[uid] = person_id
        self.people[person_id] = stored
        return True

    def add_family(self, family_id: int, family: Family) -> bool:
        """
        Add a copy of a family and record the family id on each known member.

        Returns:
            bool: False if the family id is already used.

        Raises:
            TypeError: If family_id is not an integer or family is not a Family.
        """
        _check_id(family_id, "Family id")
        if not isinstance(family, Family):
            raise TypeError(f"Expected Family, got {type(family).__name__}")
        if family_id in self.families:
            logger.warning(f"Entry {self.id}: family id {family_id} already exists")
            return False

        self.families[family_id] = copy.deepcopy(family)
        for person_id in family.members():
            if person_id in self.people:
                self.people[person_id].add_family(family_id)
        return True

    def cross_reference(self, uid: str) -> Optional[int]:
        """Return the person id for a parser uid, or None."""
        if not isinstance(uid, str):
            return None
        return self.uids.get(uid)

    def get_person_by_uid(self, uid: str) -> Optional[Person]:
        person_id = self.cross_reference(uid)
        return self.get_person(person_id) if person_id is not None else None

    def relationship(self, person_id: int) -> str:
        """Relationship code of a person, see register_compare.relationship."""
        return relationship(self, person_id)

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
        return not self.people and not self.families

    def summary(self) -> Dict[str, object]:
        return {
            'id': self.id,
            'people_count': len(self.people),
            'families_count': len(self.families),
        }

    def clone(self) -> "Entry":
        return copy.deepcopy(self)

    def fill_surname(self) -> Dict[int, str]:
        """
        Fill in missing surnames from family relationships.

        A child without a surname takes the father's surname; a father without
        a surname takes the first known surname among his children.

        Returns:
            Dict[int, str]: person id -> surname for every person updated.
        """
        updated: Dict[int, str] = {}
        for person_id in sorted(self.people):
            person = self.people[person_id]
            if person.name.surname:
                continue
            surname = self._surname_from_family(person_id)
            if surname:
                person.name.surname = surname
                updated[person_id] = surname
        if updated:
            logger.debug(f"Entry {self.id}: filled {len(updated)} surnames")
        return updated

    def _surname_from_family(self, person_id: int) -> str:
        for family_id in sorted(self.families):
            family = self.families[family_id]
            if person_id in family.children and family.father in self.people:
                father_surname = self.people[family.father].name.surname
                if father_surname:
                    return father_surname
            if family.father == person_id:
                for child_id in family.children:
                    child = self.people.get(child_id)
                    if child is not None and child.name.surname:
                        return child.name.surname
        return ''

    def fill_events(self, place: str) -> None:
        """Fill empty places of exactly dated events (including marriages) with place."""
        for person in self.people.values():
            person.fill_events(place)
        for family in self.families.values():
            family.fill_marriage(place)
