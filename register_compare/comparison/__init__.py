"""
Comparison module for assessing an extracted register page against a trusted one.

Main components:
    - EntityMatcher: Pairs up the people of one entry across two pages
    - ComparisonFacet: Base class for the comparison facets
    - PageComparer: Runs entry comparison, matching and every facet
    - assess_quality: Precision, recall and F1 scores with an overall verdict
    - Built-in facets: people, references, relationships, events
"""

from register_compare.comparison.base import ComparisonFacet, EntryContext, register_facet, get_facet_registry
from register_compare.comparison.config import ComparisonConfig
from register_compare.comparison.matcher import EntityMatcher, match_people
from register_compare.comparison.model import (
    MatchType, MatchRecord, MatchResult, PersonRef, EntryComparison, EntryDetail,
    FacetResult, PeopleResult, Summary,
)
from register_compare.comparison.quality import QualityReport, CategoryQuality, assess_quality, f1_score
from register_compare.comparison.comparer import PageComparer, ComparisonReport

# Import facets to ensure they're registered
from register_compare.comparison import facets

__all__ = [
    'ComparisonFacet',
    'EntryContext',
    'register_facet',
    'get_facet_registry',
    'ComparisonConfig',
    'EntityMatcher',
    'match_people',
    'MatchType',
    'MatchRecord',
    'MatchResult',
    'PersonRef',
    'EntryComparison',
    'EntryDetail',
    'FacetResult',
    'PeopleResult',
    'Summary',
    'QualityReport',
    'CategoryQuality',
    'assess_quality',
    'f1_score',
    'PageComparer',
    'ComparisonReport',
    'facets',
]
