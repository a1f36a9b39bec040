"""
Built-in comparison facets.

Import facets here to automatically register them.
"""

from register_compare.comparison.facets.people import PeopleFacet
from register_compare.comparison.facets.references import ReferencesFacet
from register_compare.comparison.facets.relationships import RelationshipsFacet
from register_compare.comparison.facets.events import EventsFacet

__all__ = [
    'PeopleFacet',
    'ReferencesFacet',
    'RelationshipsFacet',
    'EventsFacet',
]
