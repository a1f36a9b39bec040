"""
Pytest fixtures for comparison tests.

Pages are described as plain data: each person is a dict of PersonName and
event fields, each family a (family id, father, mother, children) tuple, with
an optional marriage date as fifth element.
"""
from __future__ import annotations

import pytest

from register_compare.comparison.base import EntryContext
from register_compare.comparison.config import ComparisonConfig
from register_compare.comparison.matcher import EntityMatcher
from register_compare.entry import Entry
from register_compare.family import Family
from register_compare.life_event import LifeEvent
from register_compare.name import PersonName
from register_compare.page import Page
from register_compare.person import Person
from register_compare.relationship import compute_relationships


def _person(entry_id: str, spec: dict) -> Person:
    person = Person(
        name=PersonName(spec.get('given', ''), spec.get('surname', '')),
        references=spec.get('references'),
        source=entry_id,
    )
    for event_type in ('birth', 'death', 'christening', 'burial'):
        if event_type in spec:
            date, place = spec[event_type]
            setattr(person, event_type, LifeEvent(date, place, what=event_type))
    return person


@pytest.fixture
def make_entry():
    """Create an Entry from {person id: spec} and family tuples."""
    def _create_entry(entry_id: str, people: dict, families=()) -> Entry:
        entry = Entry(entry_id)
        for person_id, spec in people.items():
            entry.add_person(person_id, _person(entry_id, spec))
        for family in families:
            family_id, father, mother, children = family[:4]
            marriage = LifeEvent(*family[4], what='marriage') if len(family) > 4 else None
            entry.add_family(family_id, Family(father, mother, children, marriage))
        return entry

    return _create_entry


@pytest.fixture
def make_page(make_entry):
    """Create a Page from {entry id: (people, families)}."""
    def _create_page(entries: dict, location: str = '') -> Page:
        page = Page(location)
        for entry_id, (people, families) in entries.items():
            page.add_entry(make_entry(entry_id, people, families))
        return page

    return _create_page


@pytest.fixture
def make_context():
    """Match two entries and wrap them in an EntryContext, as PageComparer does."""
    def _create_context(entry1: Entry, entry2: Entry, config: ComparisonConfig = None) -> EntryContext:
        codes1 = compute_relationships(entry1)
        codes2 = compute_relationships(entry2)
        match_result = EntityMatcher(config).match(entry1.people, entry2.people, codes1, codes2)
        return EntryContext(entry1.id, entry1, entry2, codes1, codes2, match_result)

    return _create_context


@pytest.fixture
def reference_page(make_page):
    """
    Trusted transcription.

    E1: John Smith and Mary Jones (married 1874) with children Anna and Peter.
    E2: William and Sarah Brown.
    E3: Thomas Green (missing from the extracted page).
    """
    return make_page({
        'E1': ({
            1: {'given': 'John', 'surname': 'Smith', 'birth': ('1850-03-01', 'Boston'), 'references': ['P1 L1']},
            2: {'given': 'Mary', 'surname': 'Jones', 'birth': ('1852-05-10', 'Boston')},
            3: {'given': 'Anna', 'surname': 'Smith', 'birth': ('1875-01-02', None)},
            4: {'given': 'Peter', 'surname': 'Smith'},
        }, [(1, 1, 2, [3, 4], ('1874-06-01', 'Boston'))]),
        'E2': ({
            5: {'given': 'William', 'surname': 'Brown'},
            6: {'given': 'Sarah', 'surname': 'Brown'},
        }, [(2, 5, 6, [])]),
        'E3': ({
            7: {'given': 'Thomas', 'surname': 'Green'},
        }, []),
    }, location='St Mary, Boston')


@pytest.fixture
def extracted_page(make_page):
    """
    Automatic extraction of the same page.

    E1: marriage lost, Mary read as Marie without birth, Anna's birth day
        misread, Peter read as Petr.
    E2: family lost, William gained a reference, an extra Robert Baker.
    E4: Henry Adams (not on the trusted page).
    """
    return make_page({
        'E1': ({
            10: {'given': 'John', 'surname': 'Smith', 'birth': ('1850-03-01', 'Boston'), 'references': ['P1 L1']},
            11: {'given': 'Marie', 'surname': 'Jones'},
            12: {'given': 'Anna', 'surname': 'Smith', 'birth': ('1875-01-03', None)},
            13: {'given': 'Petr', 'surname': 'Smith'},
        }, [(10, 10, 11, [12, 13])]),
        'E2': ({
            20: {'given': 'William', 'surname': 'Brown', 'references': ['P1 L5']},
            21: {'given': 'Sarah', 'surname': 'Brown'},
            22: {'given': 'Robert', 'surname': 'Baker'},
        }, []),
        'E4': ({
            40: {'given': 'Henry', 'surname': 'Adams'},
        }, []),
    })
