"""
Data models for the comparison module.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union


class MatchType(str, Enum):
    """How a pair of people was matched, strongest signal first."""
    EXACT_NAME = 'exact_name'
    EVENT_REFERENCE = 'event_reference'
    RELATIONSHIP_SIMILAR = 'relationship_similar'
    SIMILAR_NAME = 'similar_name'


def rate(count: int, total: int) -> float:
    """Percentage of count in total; 0.0 when total is 0."""
    if total == 0:
        return 0.0
    return 100.0 * count / total


@dataclass(frozen=True)
class MatchRecord:
    """A matched pair of people from the first and second page."""
    person1_id: int
    person2_id: int
    person1_name: str
    person2_name: str
    match_type: MatchType

    @property
    def is_precise(self) -> bool:
        return self.match_type == MatchType.EXACT_NAME

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['match_type'] = self.match_type.value
        return data


@dataclass(frozen=True)
class PersonRef:
    """Id and display name of an unmatched person."""
    id: int
    name: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class MatchResult:
    """
    Outcome of matching the people of one entry.

    Attributes:
        matches: Matched pairs in the order they were found
        unmatched_first: People of the first page left without a partner
        unmatched_second: People of the second page left without a partner
    """
    matches: List[MatchRecord] = field(default_factory=list)
    unmatched_first: List[PersonRef] = field(default_factory=list)
    unmatched_second: List[PersonRef] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.matches)

    def count(self, match_type: MatchType) -> int:
        return sum(1 for m in self.matches if m.match_type == match_type)

    def counts_by_type(self) -> Dict[str, int]:
        return {match_type.value: self.count(match_type) for match_type in MatchType}

    @property
    def precise(self) -> int:
        return sum(1 for m in self.matches if m.is_precise)

    @property
    def imprecise(self) -> int:
        return self.total - self.precise

    @property
    def precision_rate(self) -> float:
        return rate(self.precise, self.total)


@dataclass
class ComparisonError:
    """Base for per-pair error records of a facet."""
    person1_id: int
    person2_id: int
    person1_name: str
    person2_name: str

    def to_dict(self) -> Dict[str, Any]:
        return {k: (v.value if isinstance(v, Enum) else v) for k, v in asdict(self).items()}


@dataclass
class ReferenceRecallError(ComparisonError):
    person1_references: List[str] = field(default_factory=list)
    person2_references: List[str] = field(default_factory=list)
    missing_references: List[str] = field(default_factory=list)
    expected_count: int = 0
    actual_count: int = 0


@dataclass
class ReferencePrecisionError(ComparisonError):
    person1_references: List[str] = field(default_factory=list)
    person2_references: List[str] = field(default_factory=list)
    different_references1: List[str] = field(default_factory=list)
    different_references2: List[str] = field(default_factory=list)


@dataclass
class RelationshipError(ComparisonError):
    relationship1: str = ''
    relationship2: str = ''
    letters1: str = ''
    letters2: str = ''
    match_type: Optional[MatchType] = None


@dataclass
class EventRecallError(ComparisonError):
    event_type: str = ''
    missing_in: str = ''
    event1: Optional[str] = None
    event2: Optional[str] = None
    families1_count: Optional[int] = None
    families2_count: Optional[int] = None


@dataclass
class EventPrecisionError(ComparisonError):
    event_type: str = ''
    event1: str = ''
    event2: str = ''
    dates_differ: bool = False
    places_differ: bool = False
    family_index: Optional[int] = None


@dataclass
class EntryDetail:
    """Error records of one facet for one entry."""
    entry_id: str
    matches: List[MatchRecord] = field(default_factory=list)
    recall_errors: List[ComparisonError] = field(default_factory=list)
    precision_errors: List[ComparisonError] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'entry_id': self.entry_id,
            'matches': [m.to_dict() for m in self.matches],
            'recall_errors': [e.to_dict() for e in self.recall_errors],
            'precision_errors': [e.to_dict() for e in self.precision_errors],
        }


@dataclass
class FacetResult:
    """
    Aggregate result of the references, relationships or events facet.

    Rates are percentages of matched pairs, 0.0 when nothing was matched.
    """
    facet_id: str
    entries_compared: int = 0
    total_matches: int = 0
    details: List[EntryDetail] = field(default_factory=list)

    @property
    def recall_errors(self) -> int:
        return sum(len(d.recall_errors) for d in self.details)

    @property
    def precision_errors(self) -> int:
        return sum(len(d.precision_errors) for d in self.details)

    @property
    def recall_error_rate(self) -> float:
        return rate(self.recall_errors, self.total_matches)

    @property
    def precision_error_rate(self) -> float:
        return rate(self.precision_errors, self.total_matches)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'facet_id': self.facet_id,
            'entries_compared': self.entries_compared,
            'total_matches': self.total_matches,
            'recall_errors': self.recall_errors,
            'precision_errors': self.precision_errors,
            'recall_error_rate': self.recall_error_rate,
            'precision_error_rate': self.precision_error_rate,
            'details': [d.to_dict() for d in self.details],
        }


@dataclass
class PeopleEntryDetail:
    """Matching outcome for one entry."""
    entry_id: str
    people1_count: int
    people2_count: int
    result: MatchResult

    def to_dict(self) -> Dict[str, Any]:
        return {
            'entry_id': self.entry_id,
            'people1_count': self.people1_count,
            'people2_count': self.people2_count,
            'matches': [m.to_dict() for m in self.result.matches],
            'unmatched_in_first': [p.to_dict() for p in self.result.unmatched_first],
            'unmatched_in_second': [p.to_dict() for p in self.result.unmatched_second],
            **self.result.counts_by_type(),
        }


@dataclass
class PeopleResult:
    """Aggregate result of the people facet."""
    facet_id: str = 'people'
    entries_compared: int = 0
    details: List[PeopleEntryDetail] = field(default_factory=list)

    @property
    def total_matches(self) -> int:
        return sum(d.result.total for d in self.details)

    def count(self, match_type: MatchType) -> int:
        return sum(d.result.count(match_type) for d in self.details)

    @property
    def unmatched_in_first(self) -> int:
        return sum(len(d.result.unmatched_first) for d in self.details)

    @property
    def unmatched_in_second(self) -> int:
        return sum(len(d.result.unmatched_second) for d in self.details)

    @property
    def precise_matches(self) -> int:
        return sum(d.result.precise for d in self.details)

    @property
    def imprecise_matches(self) -> int:
        return self.total_matches - self.precise_matches

    @property
    def precision_rate(self) -> float:
        return rate(self.precise_matches, self.total_matches)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'facet_id': self.facet_id,
            'entries_compared': self.entries_compared,
            'total_matches': self.total_matches,
            **{match_type.value: self.count(match_type) for match_type in MatchType},
            'unmatched_in_first': self.unmatched_in_first,
            'unmatched_in_second': self.unmatched_in_second,
            'precise_matches': self.precise_matches,
            'imprecise_matches': self.imprecise_matches,
            'precision_rate': self.precision_rate,
            'details': [d.to_dict() for d in self.details],
        }


@dataclass
class EntryComparison:
    """Entry ids present on both pages or on one page only."""
    common: List[str] = field(default_factory=list)
    only_in_first: List[str] = field(default_factory=list)
    only_in_second: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


SummaryValue = Union[int, float, str, List[Any], Dict[str, Any]]


@dataclass
class Summary:
    """
    Container for summary values, organised into categories (e.g. 'page1', 'events')
    with named values within each category.
    """
    categories: Dict[str, Dict[str, SummaryValue]] = field(default_factory=dict)

    def add_value(self, category: str, name: str, value: SummaryValue) -> None:
        """Add a value to a category."""
        self.categories.setdefault(category, {})[name] = value

    def get_value(self, category: str, name: str, default: Optional[SummaryValue] = None) -> Optional[SummaryValue]:
        """Get a value from a category."""
        return self.categories.get(category, {}).get(name, default)

    def get_category(self, category: str) -> Dict[str, SummaryValue]:
        """Get all values in a category."""
        return self.categories.get(category, {})

    def to_dict(self) -> Dict[str, Dict[str, SummaryValue]]:
        """Convert to a plain dictionary."""
        return {category: dict(values) for category, values in self.categories.items()}
