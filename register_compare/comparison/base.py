"""
Base classes for comparison facets.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
import logging
from typing import Any, Dict, List, Type

from register_compare.entry import Entry
from register_compare.person import Person

from .config import ComparisonConfig
from .model import MatchRecord, MatchResult

logger = logging.getLogger(__name__)

# Facet Registry
_FACET_REGISTRY: Dict[str, Type['ComparisonFacet']] = {}


def register_facet(cls: Type['ComparisonFacet']) -> Type['ComparisonFacet']:
    """
    Decorator to register a facet class in the global registry.

    Usage:
        @register_facet
        @dataclass
        class MyFacet(ComparisonFacet):
            facet_id: str = "my_facet"
            ...
    """
    facet_id = getattr(cls, 'facet_id', '')
    if facet_id:
        _FACET_REGISTRY[facet_id] = cls
        logger.debug(f"Registered comparison facet: {facet_id}")
    else:
        logger.warning(f"Facet {cls.__name__} missing 'facet_id' attribute, not registered")
    return cls


def get_facet_registry() -> Dict[str, Type['ComparisonFacet']]:
    """Get the global facet registry."""
    return _FACET_REGISTRY.copy()


@dataclass
class EntryContext:
    """
    Everything the facets need about one entry present on both pages.

    Attributes:
        entry_id: Entry id shared by both pages
        entry1: The entry as read from the first page (read-only copy)
        entry2: The entry as read from the second page (read-only copy)
        codes1: Relationship codes of entry1
        codes2: Relationship codes of entry2
        match_result: Correspondence between the people of entry1 and entry2
    """
    entry_id: str
    entry1: Entry
    entry2: Entry
    codes1: Dict[int, str]
    codes2: Dict[int, str]
    match_result: MatchResult

    @property
    def matches(self) -> List[MatchRecord]:
        return self.match_result.matches

    def pair(self, match: MatchRecord) -> tuple[Person, Person]:
        """Return the two Person records of a match."""
        return self.entry1.people[match.person1_id], self.entry2.people[match.person2_id]


@dataclass
class ComparisonFacet(ABC):
    """
    Base class for comparison facets.

    A facet looks at the matched people of every common entry and reports
    what disagrees. Facets never modify the entries they are given.

    Attributes:
        facet_id: Unique identifier for this facet
        enabled: Whether this facet is run by PageComparer.compare_all
        config: Comparison configuration
    """
    facet_id: str = ""
    enabled: bool = True
    config: ComparisonConfig = field(default_factory=ComparisonConfig)

    def __post_init__(self):
        """Validate facet configuration."""
        if not self.facet_id:
            raise ValueError(f"{self.__class__.__name__} must define facet_id")

    @abstractmethod
    def analyze(self, contexts: List[EntryContext]) -> Any:
        """
        Compare the matched people of the given entries.

        Args:
            contexts: One EntryContext per common entry, in entry id order

        Returns:
            The facet's result object
        """
        pass
