"""
Pytest fixtures for register data model tests.
"""
from __future__ import annotations

import pytest

from register_compare.entry import Entry
from register_compare.family import Family
from register_compare.life_event import LifeEvent
from register_compare.name import PersonName
from register_compare.person import Person


@pytest.fixture
def make_person():
    """Create a Person from plain values."""
    def _create_person(given: str = "", surname: str = "",
                       birth_date=None, birth_place=None,
                       death_date=None, death_place=None,
                       references=None, source: str = "E1", uid: str = "") -> Person:
        person = Person(name=PersonName(given, surname), references=references, source=source, uid=uid)
        if birth_date or birth_place:
            person.birth = LifeEvent(birth_date, birth_place, what='birth')
        if death_date or death_place:
            person.death = LifeEvent(death_date, death_place, what='death')
        return person

    return _create_person


@pytest.fixture
def make_entry(make_person):
    """Create an Entry from person ids and (family id, father, mother, children) tuples."""
    def _create_entry(entry_id: str, person_ids, families=(), names=None) -> Entry:
        names = names or {}
        entry = Entry(entry_id)
        for person_id in person_ids:
            given, surname = names.get(person_id, (f"Person{person_id}", "Doe"))
            entry.add_person(person_id, make_person(given, surname, source=entry_id), uid=f"I{person_id}")
        for family_id, father, mother, children in families:
            entry.add_family(family_id, Family(father=father, mother=mother, children=children))
        return entry

    return _create_entry


@pytest.fixture
def nuclear_family(make_entry):
    """Father 1, mother 2, children 3 and 4."""
    return make_entry("E1", [1, 2, 3, 4], [(1, 1, 2, [3, 4])])


@pytest.fixture
def extended_family(make_entry):
    """
    Father 1 and mother 2 with children 3 and 4; the father's parents are 5 and 6,
    the mother's parents 7 and 8; an unrelated couple 9 and 10.
    """
    return make_entry("E1", list(range(1, 11)), [
        (1, 1, 2, [3, 4]),
        (2, 5, 6, [1]),
        (3, 7, 8, [2]),
        (4, 9, 10, []),
    ])
