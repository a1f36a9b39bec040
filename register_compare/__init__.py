"""register_compare package: Exposes the register data model and the page comparison engine."""

from register_compare.register_date import DateFormatError, RegisterDate
from register_compare.life_event import LifeEvent
from register_compare.name import PersonName
from register_compare.person import Person
from register_compare.family import Family
from register_compare.entry import Entry
from register_compare.page import Page
from register_compare.relationship import compute_relationships, relationship, relationship_letters
from register_compare.comparison import (
    ComparisonConfig,
    ComparisonReport,
    EntityMatcher,
    MatchType,
    PageComparer,
    assess_quality,
)

__all__ = [
    "ComparisonConfig",
    "ComparisonReport",
    "DateFormatError",
    "EntityMatcher",
    "Entry",
    "Family",
    "LifeEvent",
    "MatchType",
    "Page",
    "PageComparer",
    "Person",
    "PersonName",
    "RegisterDate",
    "assess_quality",
    "compute_relationships",
    "relationship",
    "relationship_letters",
]
